class CardPickError(ValueError):
    pass


class InvalidInputError(CardPickError):
    pass


class InsufficientCardsError(CardPickError):
    def __init__(self, message: str = "no active cards available"):
        super().__init__(message)
