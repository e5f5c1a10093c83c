from hostel_admin.models.people.employee import Employee
from hostel_admin.models.people.tenant import Tenant
from hostel_admin.models.people.user import User

__all__ = ["Employee", "Tenant", "User"]
