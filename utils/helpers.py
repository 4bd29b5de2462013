"""
Helpers Module - Jinja filters used by the portfolio and dashboard templates
"""

import re
from markupsafe import Markup, escape
from .validation import filter_valid_image_urls, parse_date


def format_month(value):
    """'2021-03-15' -> 'Mar 2021'; unparseable values are shown as given"""
    if not value:
        return ''
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime('%b %Y')


def date_input_value(value):
    """Value for an <input type=date>: the YYYY-MM-DD part of an ISO date"""
    if not value:
        return ''
    parsed = parse_date(value)
    return parsed.strftime('%Y-%m-%d') if parsed else ''


def paragraphs(text):
    """Render plain text as escaped paragraphs.

    - Blank lines separate paragraphs
    - Single newlines become <br>
    """
    if not text:
        return Markup('')
    txt = str(text).replace('\r\n', '\n').replace('\r', '\n').strip()
    blocks = [b.strip() for b in re.split(r'\n\s*\n', txt) if b.strip()]
    html = ''.join(
        '<p>' + '<br>\n'.join(str(escape(line)) for line in block.split('\n')) + '</p>'
        for block in blocks
    )
    return Markup(html)


def allowed_images(urls):
    """Only images served from allow-listed hosts are rendered"""
    return filter_valid_image_urls(urls)


JINJA_FILTERS = {
    'format_month': format_month,
    'date_input_value': date_input_value,
    'paragraphs': paragraphs,
    'allowed_images': allowed_images,
}


__all__ = [
    'format_month',
    'date_input_value',
    'paragraphs',
    'allowed_images',
    'JINJA_FILTERS'
]
