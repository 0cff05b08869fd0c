"""One namespace class per API tag; reach them through ``Client``."""

from discourse_api.resources.backups import Backups
from discourse_api.resources.badges import Badges
from discourse_api.resources.calendar_events import (
    DiscourseCalendarEvents,
    ExportEventsIcsParams,
    ListEventsParams,
)
from discourse_api.resources.categories import Categories
from discourse_api.resources.groups import Groups
from discourse_api.resources.invites import Invites
from discourse_api.resources.notifications import Notifications
from discourse_api.resources.posts import Posts
from discourse_api.resources.private_messages import PrivateMessages
from discourse_api.resources.search import Search
from discourse_api.resources.site import Site
from discourse_api.resources.tags import Tags
from discourse_api.resources.topics import Topics
from discourse_api.resources.uploads import Uploads
from discourse_api.resources.users import AdminListFlagParams, AdminListParams, Users
