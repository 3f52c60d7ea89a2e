import sqlalchemy as sa


class BaseRelayccException(Exception):
    pass


class SpecError(BaseRelayccException):
    """ Invalid pagination spec provided by the developer

    Reported at compile time: the query can't be built at all
    """

    def __init__(self, err: str):
        super().__init__(f'Pagination spec error: {err}')


class ArgumentError(BaseRelayccException):
    """ Invalid window arguments provided by the User

    Reported when `first`, `after`, `last`, `before` can't be used for a request
    """

    def __init__(self, err: str):
        super().__init__(f'Pagination argument error: {err}')


# Errors coming from the database are re-raised as they are
StoreError = sa.exc.DBAPIError
