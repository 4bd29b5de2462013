from extensions import db
from datetime import datetime
from sqlalchemy import JSON
import uuid

TEMPLATES = ('minimalistic', 'modern')
DEFAULT_TEMPLATE = 'minimalistic'
DEFAULT_COLORS = {
    'primary': '#3B82F6',
    'secondary': '#1E40AF',
    'highlight': '#F59E0B',
}


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class Portfolio(db.Model):
    """A portfolio document. Nested collections live in JSON columns so the
    whole record is read and replaced as one unit."""
    __tablename__ = 'portfolios'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    template = db.Column(db.String(50), default=DEFAULT_TEMPLATE)
    colors = db.Column(SafeJSON, default=lambda: dict(DEFAULT_COLORS))  # {primary, secondary, highlight}
    skills = db.Column(SafeJSON, default=list)
    projects = db.Column(SafeJSON, default=list)  # [{title, description, technologies, imageUrls, projectUrl, githubUrl}]
    education = db.Column(SafeJSON, default=list)  # [{institution, degree, field, startDate, endDate}]
    experience = db.Column(SafeJSON, default=list)  # [{company, position, description, startDate, endDate}]
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_portfolio_owner_created', 'owner_id', 'created_at'),
    )

    def __repr__(self):
        return f'<Portfolio {self.id} owner={self.owner_id}>'
