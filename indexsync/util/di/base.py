from dishka import Provider as DishkaProvider

from indexsync.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for indexsync providers. Unscoped provides default to UOW."""

    scope = Scope.UOW
