from glamour_storefront.core.domain.contact.contact_message import (
    ContactMessage,
    ContactStatus,
    ContactStatusUpdate,
    ContactSubmission,
)

__all__ = ["ContactMessage", "ContactStatus", "ContactStatusUpdate", "ContactSubmission"]
