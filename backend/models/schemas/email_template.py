from pydantic import BaseModel


class TemplateMeta(BaseModel):
    type: str
    usedResume: bool = False
    resumeName: str | None = None
    resumeSize: int | None = None


class EmailTemplate(BaseModel):
    template: str
    subject: str = ""
    body: str = ""
    meta: TemplateMeta
