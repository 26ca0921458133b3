class BaseError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidZoomLevelError(BaseError):
    def __init__(self, message: str = "The zoom level must be between 0 and 30."):
        super().__init__(message)


class InvalidQuadkeyError(BaseError):
    def __init__(
        self, message: str = "A quadkey may only contain the digits 0, 1, 2 and 3."
    ):
        super().__init__(message)


class UndefinedLatitudeError(BaseError):
    def __init__(
        self,
        message: str = "The Mercator projection is undefined at latitudes of -90 and 90.",
    ):
        super().__init__(message)
