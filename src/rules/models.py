from pydantic import BaseModel, ConfigDict, Field

from src.components.richtext.models import FormattingOptions


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LinkRelRules(BaseModel):
    # noopener and noreferrer are always emitted; only ugc is optional
    ugc: bool = False

    model_config = ConfigDict(extra="forbid")


class RichTextRules(BaseModel):
    formatting: FormattingOptions = Field(default_factory=FormattingOptions)
    link_rel: LinkRelRules = Field(default_factory=LinkRelRules)

    model_config = ConfigDict(extra="forbid")


class Rules(BaseModel):
    project: ProjectRules
    richtext: RichTextRules = Field(default_factory=RichTextRules)
