"""Demo request record — stores landing page form submissions."""

from datetime import datetime

from goloyal.models.base import Record


class DemoRequest(Record):
    id: str
    business_name: str
    contact_name: str
    email: str
    phone: str
    created_at: datetime
