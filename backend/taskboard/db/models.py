from taskboard.db.base import Base  # noqa
from taskboard.core.tags.models import Tag  # noqa
from taskboard.core.users.models import User  # noqa
from taskboard.core.columns.models import BoardColumn  # noqa
from taskboard.core.tasks.models import Task  # noqa
