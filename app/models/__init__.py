# Import all models here for easier access
from app.models.user import User
from app.models.user_profile import UserProfile
from app.models.emergency_contact import EmergencyContact
from app.models.vehicle import Vehicle
from app.models.document import Document
from app.models.document_expiry import DocumentExpiry, DocumentTypeEnum
from app.models.notification import Notification
from app.models.maintenance_schedule import MaintenanceSchedule
