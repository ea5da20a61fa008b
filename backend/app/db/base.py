from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.lead import Lead  # noqa: F401
from backend.app.models.student import Student  # noqa: F401
from backend.app.models.application import Application  # noqa: F401
from backend.app.models.admission import Admission  # noqa: F401
from backend.app.models.activity import Activity  # noqa: F401
from backend.app.models.dropdown import Dropdown  # noqa: F401
from backend.app.models.university import University, UniversityAcceptedElt, UniversityCourse, UniversityIntake  # noqa: F401
from backend.app.models.event import Event, EventRegistration  # noqa: F401
from backend.app.models.follow_up import FollowUp  # noqa: F401
