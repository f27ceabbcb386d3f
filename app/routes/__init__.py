# ── Core utilities ────────────────────────────────────────────
from app.routes.core_router import router as core_router

# ── Users & vehicles ──────────────────────────────────────────
from app.routes.user_router import router as user_router
from app.routes.profile_router import router as profile_router
from app.routes.emergency_contact_router import router as emergency_contact_router
from app.routes.vehicle_router import router as vehicle_router

# ── Documents & compliance ────────────────────────────────────
from app.routes.document_router import router as document_router
from app.routes.document_expiry_router import router as document_expiry_router

# ── Notifications, dashboard & maintenance ────────────────────
from app.routes.notification_router import router as notification_router
from app.routes.stats_router import router as stats_router
from app.routes.maintenance_router import router as maintenance_router
