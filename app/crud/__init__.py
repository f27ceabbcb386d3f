# Import all CRUD modules for easier access
from app.crud.user import user_crud
from app.crud.user_profile import user_profile_crud
from app.crud.emergency_contact import emergency_contact_crud
from app.crud.vehicle import vehicle_crud
from app.crud.document import document_crud
from app.crud.notification import notification_crud
from app.crud.document_expiry import document_expiry_crud
from app.crud.maintenance_schedule import maintenance_schedule_crud
