# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# users doit être chargé en premier : toutes les tables y référencent user_id.

from placement_tracker.models.user import User  # noqa: F401  — doit précéder les autres
from placement_tracker.models.student import Student  # noqa: F401
from placement_tracker.models.company import Company  # noqa: F401
from placement_tracker.models.interview import Interview, InterviewStudent  # noqa: F401
from placement_tracker.models.placement import Placement  # noqa: F401
