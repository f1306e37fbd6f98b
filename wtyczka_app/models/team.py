"""Organising staff shown on the contacts page."""

from __future__ import annotations

from wtyczka_app.core.extensions import db


class TeamMember(db.Model):
    __tablename__ = 'team_members'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(80))
    photo_url = db.Column(db.String(500), nullable=False, default='')
    email = db.Column(db.String(255), nullable=False)
    facebook_url = db.Column(db.String(500), nullable=False, default='')
    display_order = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f'<TeamMember {self.name}>'
