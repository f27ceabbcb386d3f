import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import date

from app.models import User, Vehicle, DocumentExpiry, DocumentTypeEnum, Notification


def test_user_model(test_db: Session):
    user = User(username="7777777777", mobile="7777777777")
    test_db.add(user)
    test_db.commit()

    fetched = test_db.query(User).filter(User.username == "7777777777").first()

    assert fetched is not None
    assert fetched.is_verified == False
    assert fetched.created_at is not None


def test_vehicle_model(test_db: Session, test_user):
    vehicle = Vehicle(
        user_id=test_user.user_id,
        make="Tata",
        model="Nexon",
        year=2023,
        color="Blue",
        license_plate="MH12XY0001",
        owner_name="Asha",
        emission_expiry=date(2026, 5, 1),
    )
    test_db.add(vehicle)
    test_db.commit()

    fetched = test_db.query(Vehicle).filter(Vehicle.license_plate == "MH12XY0001").first()

    assert fetched.user.user_id == test_user.user_id
    assert fetched.emission_expiry == date(2026, 5, 1)
    assert fetched.insurance_expiry is None
    assert fetched.notifications == []


def test_license_plate_is_unique(test_db: Session, test_user, make_vehicle):
    make_vehicle(test_user, license_plate="KA01ZZ0001")

    with pytest.raises(IntegrityError):
        make_vehicle(test_user, license_plate="KA01ZZ0001")


def test_document_expiry_model(test_db: Session, test_user, make_vehicle):
    vehicle = make_vehicle(test_user)
    record = DocumentExpiry(
        vehicle_id=vehicle.vehicle_id,
        user_id=test_user.user_id,
        document_type=DocumentTypeEnum.TRAVEL_PERMITS,
        expiry_date=date(2026, 8, 15),
    )
    test_db.add(record)
    test_db.commit()
    test_db.refresh(record)

    assert record.document_type == DocumentTypeEnum.TRAVEL_PERMITS
    assert record.is_active == True
    assert record.reminder_sent == False
    assert vehicle.document_expiries[0].document_expiry_id == record.document_expiry_id


def test_notification_unique_key(test_db: Session, test_user, make_vehicle):
    vehicle = make_vehicle(test_user)

    def _notification(type="rc_book"):
        return Notification(
            vehicle_id=vehicle.vehicle_id,
            type=type,
            title="URGENT: RC Book Expired!",
            message="Your vehicle's RC Book expired 2 days ago (2026-02-27).",
            message_key="expired:2026-02-27",
            due_date=date(2026, 2, 27),
        )

    test_db.add(_notification())
    test_db.commit()

    # Same key under another type is a different notification
    test_db.add(_notification(type="emission"))
    test_db.commit()

    test_db.add(_notification())
    with pytest.raises(IntegrityError):
        test_db.commit()
    test_db.rollback()

    assert test_db.query(Notification).count() == 2


def test_document_type_stored_as_value(test_db: Session, test_user, make_vehicle):
    vehicle = make_vehicle(test_user)
    test_db.add(DocumentExpiry(
        vehicle_id=vehicle.vehicle_id,
        user_id=test_user.user_id,
        document_type=DocumentTypeEnum.ROAD_TAX,
        expiry_date=date(2026, 8, 15),
    ))
    test_db.commit()

    raw = test_db.execute(text("SELECT document_type FROM document_expiries")).scalar_one()
    fetched = test_db.query(DocumentExpiry).one()

    assert raw == "road_tax"
    assert fetched.document_type is DocumentTypeEnum.ROAD_TAX
