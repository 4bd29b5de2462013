"""
Edit Buffer - Element-wise edits on portfolio arrays

The API only ever replaces whole arrays. The dashboard keeps a snapshot of
the selected portfolio in a PortfolioEditBuffer, computes the next full
array for an add/edit/remove, and submits that array in a single update.

The form builders below turn submitted dashboard forms into array entries,
running the edit-boundary validators first. Each returns ``(entry, error)``
with exactly one of the two set.
"""

from .validation import (
    validate_text_length, is_valid_url, is_valid_hex_color,
    validate_date_range, parse_comma_separated
)

SECTIONS = ('skills', 'projects', 'education', 'experience')


class EditBufferError(ValueError):
    pass


class PortfolioEditBuffer:
    """Snapshot of one portfolio's arrays plus pure next-state helpers"""

    def __init__(self, portfolio):
        self.portfolio_id = portfolio['id']
        self._arrays = {name: list(portfolio.get(name) or []) for name in SECTIONS}

    def items(self, section):
        return list(self._section(section))

    def added(self, section, item):
        return self._section(section) + [item]

    def replaced(self, section, index, item):
        current = self._section(section)
        self._check_index(current, index)
        return [item if idx == index else existing for idx, existing in enumerate(current)]

    def removed(self, section, index):
        current = self._section(section)
        self._check_index(current, index)
        return [existing for idx, existing in enumerate(current) if idx != index]

    def payload(self, section, items):
        """Update payload replacing one array wholesale"""
        self._section(section)
        return {'id': self.portfolio_id, section: items}

    def _section(self, section):
        if section not in self._arrays:
            raise EditBufferError(f'Unknown section: {section}')
        return self._arrays[section]

    @staticmethod
    def _check_index(items, index):
        if not 0 <= index < len(items):
            raise EditBufferError('Item no longer exists')


def _first_error(*errors):
    return next((e for e in errors if e), None)


def _text(form, name):
    return (form.get(name) or '').strip()


def build_details(form):
    """Title, description, template and colors from the create/details forms"""
    title = _text(form, 'title')
    description = _text(form, 'description')
    error = _first_error(
        validate_text_length(title, 100, 'Title'),
        validate_text_length(description, 500, 'Description'),
    )
    if error:
        return None, error

    colors = {
        'primary': _text(form, 'color_primary'),
        'secondary': _text(form, 'color_secondary'),
        'highlight': _text(form, 'color_highlight'),
    }
    if not all(is_valid_hex_color(c) for c in colors.values()):
        return None, 'Please select valid colors'

    template = form.get('template') or 'minimalistic'
    if template not in ('minimalistic', 'modern'):
        template = 'minimalistic'

    return {
        'title': title,
        'description': description,
        'template': template,
        'colors': colors,
    }, None


def build_skill(form):
    skill = _text(form, 'skill')
    error = validate_text_length(skill, 50, 'Skill')
    if error:
        return None, error
    return skill, None


def build_project(form):
    title = _text(form, 'title')
    description = _text(form, 'description')
    error = _first_error(
        validate_text_length(title, 100, 'Project title'),
        validate_text_length(description, 1000, 'Project description'),
    )
    if error:
        return None, error

    image_urls = [url.strip() for url in form.getlist('imageUrls') if url.strip()]
    for url in image_urls:
        if not is_valid_url(url):
            return None, f'Invalid image URL: {url}'

    project_url = _text(form, 'projectUrl')
    github_url = _text(form, 'githubUrl')
    if project_url and not is_valid_url(project_url):
        return None, 'Invalid project URL'
    if github_url and not is_valid_url(github_url):
        return None, 'Invalid GitHub URL'

    project = {
        'title': title,
        'description': description,
        'technologies': parse_comma_separated(form.get('technologies')),
    }
    if image_urls:
        project['imageUrls'] = image_urls
    if project_url:
        project['projectUrl'] = project_url
    if github_url:
        project['githubUrl'] = github_url
    return project, None


def _dates(form):
    start_date = _text(form, 'startDate')
    end_date = _text(form, 'endDate')
    if not start_date:
        return None, None, 'Start date is required'
    error = validate_date_range(start_date, end_date or None)
    return start_date, end_date, error


def build_education(form):
    institution = _text(form, 'institution')
    degree = _text(form, 'degree')
    field = _text(form, 'field')
    error = _first_error(
        validate_text_length(institution, 200, 'Institution'),
        validate_text_length(degree, 100, 'Degree'),
        validate_text_length(field, 100, 'Field of study'),
    )
    if error:
        return None, error

    start_date, end_date, error = _dates(form)
    if error:
        return None, error

    entry = {
        'institution': institution,
        'degree': degree,
        'field': field,
        'startDate': start_date,
    }
    if end_date:
        entry['endDate'] = end_date
    return entry, None


def build_experience(form):
    company = _text(form, 'company')
    position = _text(form, 'position')
    description = _text(form, 'description')
    error = _first_error(
        validate_text_length(company, 200, 'Company'),
        validate_text_length(position, 100, 'Position'),
        validate_text_length(description, 1000, 'Description'),
    )
    if error:
        return None, error

    start_date, end_date, error = _dates(form)
    if error:
        return None, error

    entry = {
        'company': company,
        'position': position,
        'description': description,
        'startDate': start_date,
    }
    if end_date:
        entry['endDate'] = end_date
    return entry, None


ENTRY_BUILDERS = {
    'skills': build_skill,
    'projects': build_project,
    'education': build_education,
    'experience': build_experience,
}

SECTION_LABELS = {
    'skills': 'Skill',
    'projects': 'Project',
    'education': 'Education',
    'experience': 'Experience',
}


__all__ = [
    'SECTIONS',
    'EditBufferError',
    'PortfolioEditBuffer',
    'build_details',
    'build_skill',
    'build_project',
    'build_education',
    'build_experience',
    'ENTRY_BUILDERS',
    'SECTION_LABELS'
]
