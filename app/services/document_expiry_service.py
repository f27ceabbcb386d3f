"""
Document Expiry Service
Checks a user's vehicle documents against today's date and stores
renewal / expired notifications.

Entry points:
- run_expiry_check_process(user_id): full sweep over the user's vehicles
- process_document_upload(...): track a freshly uploaded document and
  check it immediately

Both are best effort. Errors are logged and the session rolled back; nothing
is raised to the caller.
"""
from datetime import date
from typing import List, Optional, Sequence, Union

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.core.logging_config import get_logger
from app.crud.document_expiry import document_expiry_crud
from app.crud.notification import notification_crud
from app.crud.vehicle import vehicle_crud
from app.database.session import get_db
from app.models.document_expiry import DocumentExpiry, DocumentTypeEnum
from app.models.notification import Notification
from app.models.vehicle import Vehicle
from app.schemas.document_expiry import DocumentExpiryCreate
from app.schemas.notification import NotificationCreate
from app.utils.clock import SystemClock, get_clock

logger = get_logger(__name__)

# Every type a user can upload with an expiry date
EXPIRY_DOCUMENT_TYPES = (
    DocumentTypeEnum.ROAD_TAX,
    DocumentTypeEnum.FITNESS_CERTIFICATE,
    DocumentTypeEnum.TRAVEL_PERMITS,
    DocumentTypeEnum.EMISSION,
    DocumentTypeEnum.RC_BOOK,
    DocumentTypeEnum.INSURANCE,
)

# Types whose expiry lives on the vehicle row
VEHICLE_EXPIRY_FIELDS = {
    DocumentTypeEnum.EMISSION: "emission_expiry",
    DocumentTypeEnum.RC_BOOK: "rc_expiry",
}

# Insurance expiry is kept in on-device storage, not on the server
SWEEP_SKIPPED_TYPES = {DocumentTypeEnum.INSURANCE}

WEEKLY_REMINDER_DAYS = (30, 23, 16, 9, 2)

DOCUMENT_LABELS = {
    DocumentTypeEnum.ROAD_TAX: "Road Tax",
    DocumentTypeEnum.FITNESS_CERTIFICATE: "Fitness Certificate",
    DocumentTypeEnum.TRAVEL_PERMITS: "Travel Permit",
    DocumentTypeEnum.EMISSION: "Emission Certificate",
    DocumentTypeEnum.RC_BOOK: "RC Book",
    DocumentTypeEnum.INSURANCE: "Insurance",
}

RENEWAL_ADVICE = {
    DocumentTypeEnum.ROAD_TAX: "Please renew to avoid penalties.",
    DocumentTypeEnum.FITNESS_CERTIFICATE: "Renewal is required for legal compliance.",
    DocumentTypeEnum.TRAVEL_PERMITS: "Please renew before traveling.",
    DocumentTypeEnum.EMISSION: "Get it renewed to avoid violations.",
    DocumentTypeEnum.RC_BOOK: "Renew your registration to keep the vehicle road legal.",
    DocumentTypeEnum.INSURANCE: "Renew your policy to stay covered.",
}


def days_until(expiry_date: date, today: date) -> int:
    """Whole calendar days from today to expiry; negative once past."""
    return (expiry_date - today).days


def should_send_weekly_notification(
    days_until_expiry: int, reminder_days: Sequence[int] = WEEKLY_REMINDER_DAYS
) -> bool:
    """True when the day offset is one of the scheduled reminder days."""
    return days_until_expiry in reminder_days


def parse_expiry_date(value: Union[date, str, None]) -> Optional[date]:
    """Accept a date or an ISO string; raises ValueError on malformed input."""
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def build_expiry_notification(
    vehicle_id: int, document_type: DocumentTypeEnum, expiry_date: date, days_diff: int
) -> NotificationCreate:
    """Notification payload for a document ``days_diff`` days from expiry."""
    label = DOCUMENT_LABELS[document_type]
    expiry_str = expiry_date.isoformat()

    if days_diff > 0:
        return NotificationCreate(
            vehicle_id=vehicle_id,
            type=document_type.value,
            title=f"{label} Renewal Reminder",
            message=(
                f"Your vehicle's {label} expires in {days_diff} days ({expiry_str}). "
                f"{RENEWAL_ADVICE[document_type]}"
            ),
            message_key=f"upcoming:{expiry_str}:{days_diff}",
            due_date=expiry_date,
        )

    days_overdue = abs(days_diff)
    when = "today" if days_overdue == 0 else f"{days_overdue} days ago"
    return NotificationCreate(
        vehicle_id=vehicle_id,
        type=document_type.value,
        title=f"URGENT: {label} Expired!",
        message=(
            f"Your vehicle's {label} expired {when} ({expiry_str}). "
            f"Renew it immediately to avoid fines."
        ),
        message_key=f"expired:{expiry_str}",
        due_date=expiry_date,
    )


class DocumentExpiryService:
    """
    Expiry sweep over a user's vehicles.

    ``reminder_days`` restricts upcoming reminders to those day offsets;
    empty means every future expiry is reminded.
    """

    def __init__(self, db: Session, clock=None, reminder_days: Optional[Sequence[int]] = None):
        self.db = db
        self.clock = clock or SystemClock()
        self.reminder_days = list(reminder_days) if reminder_days is not None else self._configured_reminder_days()

    @staticmethod
    def _configured_reminder_days() -> List[int]:
        try:
            return settings.expiry_reminder_days
        except ValueError:
            logger.error(
                f"[ExpirySweep] Ignoring malformed EXPIRY_REMINDER_DAYS={settings.EXPIRY_REMINDER_DAYS!r}; "
                f"reminding on every day"
            )
            return []

    def run_expiry_check_process(self, user_id: int) -> List[Notification]:
        """Check every vehicle of the user; returns the notifications created."""
        created: List[Notification] = []
        try:
            logger.info(f"[ExpirySweep] Running document expiry check for user_id={user_id}")

            vehicles = vehicle_crud.get_by_user(self.db, user_id=user_id)
            if not vehicles:
                logger.info(f"[ExpirySweep] No vehicles found for user_id={user_id}")
                return created

            vehicle_ids = [vehicle.vehicle_id for vehicle in vehicles]
            for vehicle_id in vehicle_ids:
                created.extend(self.process_vehicle_expiries(vehicle_id, user_id))

            logger.info(
                f"[ExpirySweep] Completed for user_id={user_id} | vehicles={len(vehicle_ids)}, created={len(created)}"
            )
        except Exception as e:
            self.db.rollback()
            logger.exception(f"[ExpirySweep] Error in document expiry check for user_id={user_id}: {e}")
        return created

    def process_vehicle_expiries(self, vehicle_id: int, user_id: int) -> List[Notification]:
        created: List[Notification] = []
        try:
            vehicle = vehicle_crud.get_by_id_and_user(self.db, vehicle_id=vehicle_id, user_id=user_id)
            if not vehicle:
                logger.warning(f"[ExpirySweep] Vehicle {vehicle_id} not found for user_id={user_id}")
                return created

            for document_type in EXPIRY_DOCUMENT_TYPES:
                notification = self.check_document_type(vehicle, document_type)
                if notification is not None:
                    created.append(notification)
        except Exception as e:
            self.db.rollback()
            logger.exception(f"[ExpirySweep] Error processing vehicle {vehicle_id} expiries: {e}")
        return created

    def check_document_type(self, vehicle: Vehicle, document_type: DocumentTypeEnum) -> Optional[Notification]:
        vehicle_id = vehicle.vehicle_id
        try:
            if document_type in SWEEP_SKIPPED_TYPES:
                return None

            field = VEHICLE_EXPIRY_FIELDS.get(document_type)
            if field is None:
                # road tax, fitness and permits have no vehicle column
                return None

            expiry_date = parse_expiry_date(getattr(vehicle, field))
            if expiry_date is None:
                return None

            return self.process_expiry_notifications(vehicle_id, document_type, expiry_date)
        except Exception as e:
            self.db.rollback()
            logger.exception(f"[ExpirySweep] Error checking {document_type.value} for vehicle {vehicle_id}: {e}")
            return None

    def process_expiry_notifications(
        self, vehicle_id: int, document_type: DocumentTypeEnum, expiry_date: date
    ) -> Optional[Notification]:
        try:
            days_diff = days_until(expiry_date, self.clock.today())
            logger.debug(
                f"[ExpirySweep] {document_type.value} for vehicle {vehicle_id} expires in {days_diff} days"
            )

            if days_diff > 0 and self.reminder_days and not should_send_weekly_notification(days_diff, self.reminder_days):
                return None

            return self.create_expiry_notification(vehicle_id, document_type, expiry_date, days_diff)
        except Exception as e:
            self.db.rollback()
            logger.exception(f"[ExpirySweep] Error processing notifications for {document_type.value}: {e}")
            return None

    def create_expiry_notification(
        self, vehicle_id: int, document_type: DocumentTypeEnum, expiry_date: date, days_diff: int
    ) -> Optional[Notification]:
        payload = build_expiry_notification(vehicle_id, document_type, expiry_date, days_diff)

        existing = notification_crud.get_by_vehicle(self.db, vehicle_id=vehicle_id)
        if any(
            n.type == payload.type and n.title == payload.title and n.message_key == payload.message_key
            for n in existing
        ):
            return None

        # unique (vehicle_id, type, message_key) catches a concurrent sweep
        notification = notification_crud.create_if_absent(self.db, obj_in=payload)
        if notification is not None:
            logger.info(
                f"[ExpirySweep] Created {document_type.value} notification for vehicle {vehicle_id} | days={days_diff}"
            )
        return notification

    def process_document_upload(
        self,
        vehicle_id: int,
        user_id: int,
        document_type: str,
        expiry_date: Union[date, str, None] = None,
        amount: Optional[float] = None,
    ) -> Optional[DocumentExpiry]:
        """
        Track an uploaded document's expiry and check it right away.

        Returns the stored record, or None when the type is not tracked,
        no expiry was given, or processing failed.
        """
        try:
            if document_type not in {t.value for t in EXPIRY_DOCUMENT_TYPES} or not expiry_date:
                return None

            doc_type = DocumentTypeEnum(document_type)
            parsed_expiry = parse_expiry_date(expiry_date)

            document_expiry_crud.deactivate_active(self.db, vehicle_id=vehicle_id, document_type=doc_type)
            record = document_expiry_crud.create(
                self.db,
                obj_in=DocumentExpiryCreate(
                    vehicle_id=vehicle_id,
                    user_id=user_id,
                    document_type=doc_type,
                    expiry_date=parsed_expiry,
                    amount=amount,
                    issue_date=self.clock.today(),
                ),
            )
            self.db.commit()
            self.db.refresh(record)
            logger.info(f"[DocumentUpload] Tracked {doc_type.value} for vehicle {vehicle_id} | expiry={parsed_expiry}")

            if self.process_expiry_notifications(vehicle_id, doc_type, parsed_expiry) is not None:
                record.reminder_sent = True
                self.db.commit()
                self.db.refresh(record)
            return record
        except Exception as e:
            self.db.rollback()
            logger.exception(f"[DocumentUpload] Error processing {document_type} upload for vehicle {vehicle_id}: {e}")
            return None


def get_document_expiry_service(
    db: Session = Depends(get_db), clock=Depends(get_clock)
) -> DocumentExpiryService:
    return DocumentExpiryService(db, clock=clock)
