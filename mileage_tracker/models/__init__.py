# Mileage Tracker — Database Models
# Import all models here for SQLAlchemy discovery

from mileage_tracker.models.vehicle import Vehicle                        # noqa
from mileage_tracker.models.supervisor import Supervisor                  # noqa
from mileage_tracker.models.mileage_entry import MileageEntry             # noqa
from mileage_tracker.models.push_subscription import PushSubscription     # noqa
