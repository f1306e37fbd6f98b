"""Registration and payment records submitted by participants."""

from __future__ import annotations

from sqlalchemy.sql import func

from wtyczka_app.core.extensions import db


class Registration(db.Model):
    """One registration form per participant (keyed by the auth user id)."""

    __tablename__ = 'registrations'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(128), nullable=False, unique=True, index=True)
    email = db.Column(db.String(255), nullable=False, index=True)

    # Personal data
    name = db.Column(db.String(50), nullable=False)
    surname = db.Column(db.String(50), nullable=False)
    dob = db.Column(db.Date, nullable=False)
    phone_number = db.Column(db.String(32), nullable=False)
    pesel = db.Column(db.String(11), nullable=False)
    gender = db.Column(db.String(10), nullable=False)
    over18 = db.Column(db.Boolean, nullable=False, default=True)

    # Studies
    faculty = db.Column(db.String(4), nullable=False)
    student_number = db.Column(db.String(30), nullable=False)
    study_field = db.Column(db.String(60), nullable=False)
    study_level = db.Column(db.String(10), nullable=False)
    study_year = db.Column(db.Integer, nullable=False)

    # Logistics
    diet_name = db.Column(db.String(20), nullable=False)
    tshirt_size = db.Column(db.String(4), nullable=False)

    # Invoice
    invoice = db.Column(db.Boolean, nullable=False, default=False)
    invoice_name = db.Column(db.String(100))
    invoice_surname = db.Column(db.String(100))
    invoice_id = db.Column(db.String(50))
    invoice_address = db.Column(db.String(255))

    # Marketing
    about_wtyczka = db.Column(db.String(30), nullable=False)
    about_wtyczka_info = db.Column(db.Text)

    # Consents
    reg_accept = db.Column(db.Boolean, nullable=False, default=False)
    rodo_accept = db.Column(db.Boolean, nullable=False, default=False)

    qualified = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f'<Registration {self.id} user={self.user_id}>'


class Payment(db.Model):
    """Payment declaration with the uploaded transfer confirmation."""

    __tablename__ = 'payments'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(128), nullable=False, unique=True, index=True)
    registration_id = db.Column(db.Integer, db.ForeignKey('registrations.id'), nullable=True)

    student_status = db.Column(db.String(20), nullable=False)
    emergency_contact_name = db.Column(db.String(120), nullable=False)
    emergency_contact_phone = db.Column(db.String(32), nullable=False)
    emergency_contact_relation = db.Column(db.String(60))

    needs_transport = db.Column(db.Boolean, nullable=False, default=False)
    medical_conditions = db.Column(db.Text)
    medications = db.Column(db.Text)

    # {url, fileName, fileSize, fileType, uploadedAt}
    payment_confirmation_file = db.Column(db.JSON, nullable=True)

    transfer_confirmation = db.Column(db.Boolean, nullable=False, default=False)
    age_confirmation = db.Column(db.Boolean, nullable=False, default=False)
    cancellation_policy = db.Column(db.Boolean, nullable=False, default=False)

    # Set by organisers once the transfer is verified
    qualified = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f'<Payment {self.id} user={self.user_id}>'
