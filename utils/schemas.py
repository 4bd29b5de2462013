"""
Request schemas for the portfolio API

Each operation validates its JSON body against one of these models before
touching the database. Field names on the wire are camelCase; the models
accept either spelling and always dump camelCase.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models import DEFAULT_COLORS
from .validation import is_valid_url

HEX_COLOR_PATTERN = r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$'


class _Entry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ColorScheme(_Entry):
    primary: str = Field(DEFAULT_COLORS['primary'], pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(DEFAULT_COLORS['secondary'], pattern=HEX_COLOR_PATTERN)
    highlight: str = Field(DEFAULT_COLORS['highlight'], pattern=HEX_COLOR_PATTERN)


class ProjectEntry(_Entry):
    title: str
    description: str
    technologies: List[str] = Field(default_factory=list)
    image_urls: Optional[List[str]] = Field(None, alias='imageUrls')
    # Legacy single-image field, kept so older documents survive a round trip
    image_url: Optional[str] = Field(None, alias='imageUrl')
    project_url: Optional[str] = Field(None, alias='projectUrl')
    github_url: Optional[str] = Field(None, alias='githubUrl')

    @field_validator('project_url', 'github_url')
    @classmethod
    def _http_url(cls, value):
        if value is not None and not is_valid_url(value):
            raise ValueError('must be an http(s) URL')
        return value


class EducationEntry(_Entry):
    institution: str
    degree: str
    field: str
    start_date: str = Field(..., alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')


class ExperienceEntry(_Entry):
    company: str
    position: str
    description: str
    start_date: str = Field(..., alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')


class PortfolioFields(_Entry):
    """Fields shared by create and update; every one is optional here"""
    title: Optional[str] = None
    description: Optional[str] = None
    template: Optional[Literal['minimalistic', 'modern']] = None
    colors: Optional[ColorScheme] = None
    skills: Optional[List[str]] = None
    projects: Optional[List[ProjectEntry]] = None
    education: Optional[List[EducationEntry]] = None
    experience: Optional[List[ExperienceEntry]] = None


class PortfolioCreate(PortfolioFields):
    pass


class PortfolioUpdate(PortfolioFields):
    id: Optional[str] = None


def describe_validation_error(exc: ValidationError) -> str:
    """First error of a pydantic ValidationError as 'field.path: message'"""
    errors = exc.errors()
    if not errors:
        return 'Invalid request body'
    first = errors[0]
    location = '.'.join(str(part) for part in first.get('loc', ()))
    message = first.get('msg', 'Invalid value')
    return f'{location}: {message}' if location else message


__all__ = [
    'ColorScheme',
    'ProjectEntry',
    'EducationEntry',
    'ExperienceEntry',
    'PortfolioCreate',
    'PortfolioUpdate',
    'describe_validation_error'
]
