"""
Content Models - Shapes of the localized CV documents stored under data/
Each document is decoded whole; a document that does not match its shape is rejected.
"""

from typing import List
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')


class Profile(ContentModel):
    title: str = ''
    text: str = ''


class ExperienceItem(ContentModel):
    title: str
    company: str
    period: str
    description: List[str] = Field(default_factory=list)


class EducationItem(ContentModel):
    title: str
    institution: str
    period: str


class ProjectItem(ContentModel):
    title: str
    description: str
    link: str = ''

    @property
    def github_repo(self):
        """Return 'owner/name' when the link points at a GitHub repository"""
        parsed = urlparse(self.link)
        if parsed.netloc.lower() not in ('github.com', 'www.github.com'):
            return None
        parts = [p for p in parsed.path.split('/') if p]
        if len(parts) < 2:
            return None
        return f"{parts[0]}/{parts[1]}"


class ExperienceList(ContentModel):
    items: List[ExperienceItem] = Field(default_factory=list)


class EducationList(ContentModel):
    items: List[EducationItem] = Field(default_factory=list)


class ProjectList(ContentModel):
    items: List[ProjectItem] = Field(default_factory=list)


# Content kind -> document model
CONTENT_MODELS = {
    'profile': Profile,
    'experience': ExperienceList,
    'education': EducationList,
    'projects': ProjectList,
}
