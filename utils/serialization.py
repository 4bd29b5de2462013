"""
Serialization Module - Turns stored portfolio documents into client-safe dicts
for the public page and the public read endpoint.

Normalization happens once, at the read boundary. Nothing here writes back to
the database: a legacy ``imageUrl`` stays as it is in storage and is only
presented as ``imageUrls``.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, List

from models import DEFAULT_COLORS, DEFAULT_TEMPLATE


def serialize_for_client(value: Any) -> Any:
    """Recursively convert identifiers and dates into plain strings"""
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return str(value)
    # datetime is a subclass of date
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): serialize_for_client(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_for_client(item) for item in value]
    return value


def _text(value) -> str:
    return value if isinstance(value, str) else ''


def _records(value) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _date_text(value):
    if not value:
        return None
    if isinstance(value, str):
        return value
    return serialize_for_client(value)


def normalize_colors(colors) -> Dict[str, str]:
    if not isinstance(colors, dict):
        return dict(DEFAULT_COLORS)
    return {
        key: colors.get(key) if isinstance(colors.get(key), str) and colors.get(key) else default
        for key, default in DEFAULT_COLORS.items()
    }


def normalize_project(project: Dict[str, Any]) -> Dict[str, Any]:
    """Prefer ``imageUrls``; wrap a legacy ``imageUrl`` as a one-element list"""
    image_urls = project.get('imageUrls')
    if isinstance(image_urls, list):
        image_urls = [url for url in image_urls if isinstance(url, str) and url]
    elif isinstance(project.get('imageUrl'), str) and project.get('imageUrl'):
        image_urls = [project['imageUrl']]
    else:
        image_urls = []

    technologies = project.get('technologies')
    return {
        'title': _text(project.get('title')),
        'description': _text(project.get('description')),
        'technologies': [t for t in technologies if isinstance(t, str)] if isinstance(technologies, list) else [],
        'imageUrls': image_urls,
        'projectUrl': project.get('projectUrl') or None,
        'githubUrl': project.get('githubUrl') or None,
    }


def normalize_education(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'institution': _text(entry.get('institution')),
        'degree': _text(entry.get('degree')),
        'field': _text(entry.get('field')),
        'startDate': _date_text(entry.get('startDate')) or '',
        'endDate': _date_text(entry.get('endDate')),
    }


def normalize_experience(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'company': _text(entry.get('company')),
        'position': _text(entry.get('position')),
        'description': _text(entry.get('description')),
        'startDate': _date_text(entry.get('startDate')) or '',
        'endDate': _date_text(entry.get('endDate')),
    }


def normalize_portfolio(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the shape both templates render from a raw stored document.

    Missing or malformed fields fall back to the same defaults a newly
    created portfolio gets. The owner id is deliberately left out.
    """
    doc = serialize_for_client(document) or {}
    skills = doc.get('skills')

    return {
        'id': doc.get('id') or doc.get('_id'),
        'title': _text(doc.get('title')),
        'description': _text(doc.get('description')),
        'template': doc.get('template') or DEFAULT_TEMPLATE,
        'colors': normalize_colors(doc.get('colors')),
        'skills': [s for s in skills if isinstance(s, str)] if isinstance(skills, list) else [],
        'projects': [normalize_project(p) for p in _records(doc.get('projects'))],
        'education': [normalize_education(e) for e in _records(doc.get('education'))],
        'experience': [normalize_experience(e) for e in _records(doc.get('experience'))],
        'createdAt': doc.get('createdAt'),
        'updatedAt': doc.get('updatedAt'),
    }


def select_template(portfolio: Dict[str, Any]) -> str:
    """Template file for a normalized portfolio; anything but 'modern' is minimalistic"""
    if portfolio.get('template') == 'modern':
        return 'portfolio/modern.html'
    return 'portfolio/minimalistic.html'


__all__ = [
    'serialize_for_client',
    'normalize_colors',
    'normalize_project',
    'normalize_education',
    'normalize_experience',
    'normalize_portfolio',
    'select_template'
]
