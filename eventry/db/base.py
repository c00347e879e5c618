
from eventry.db.session import Base
from eventry.models.user import User
from eventry.models.venue import Venue
from eventry.models.event import Event
from eventry.models.guest import Guest
from eventry.models.guest_list import GuestList, ListEntry
from eventry.models.ticket import Ticket
from eventry.models.check_in import CheckIn
from eventry.models.consumption import Consumption
