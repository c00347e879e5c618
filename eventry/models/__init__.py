from eventry.models.user import User, UserRole
from eventry.models.venue import Venue
from eventry.models.event import Event, EventStatus
from eventry.models.guest import Guest
from eventry.models.guest_list import GuestList, ListEntry, ListType
from eventry.models.ticket import Ticket
from eventry.models.check_in import CheckIn
from eventry.models.consumption import Consumption
