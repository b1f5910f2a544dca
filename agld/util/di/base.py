from dishka import Provider as DishkaProvider


class Provider(DishkaProvider):
    """Base for all AGLD DI providers.

    Providers are grouped per bounded context (``domain/<ctx>/util/di``) or per
    infrastructure adapter (``infrastructure/<adapter>/di.py``) and composed in
    ``agld.application.di.create_container``.
    """
