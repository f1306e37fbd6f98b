"""Database models package for Wtyczka."""

from ..core.extensions import db

from .app_settings import AppSettings
from .enrolment import Payment, Registration
from .team import TeamMember

__all__ = [
    'db',
    'AppSettings',
    'Payment',
    'Registration',
    'TeamMember',
]
