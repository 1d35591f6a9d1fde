from typing import Mapping, Optional, Tuple

# W3C GeolocationPositionError codes, as reported by the browser
PERMISSION_DENIED = 1
POSITION_UNAVAILABLE = 2
TIMEOUT = 3


class GeolocationError(Exception):
    def __init__(self, code: int, message: str = ""):
        super().__init__(message or f"Geolocation failed (code {code})")
        self.code = code

    @property
    def permission_denied(self) -> bool:
        return self.code == PERMISSION_DENIED


class BrowserGeolocation:
    """
    Position reported by the browser's ``navigator.geolocation``.

    The page script asks the device for its position and posts either the
    coordinates or the error code; this class hands that result to the
    resolver in the same shape as any other position provider.
    """

    def __init__(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        error_code: Optional[int] = None,
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.error_code = error_code

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "BrowserGeolocation":
        code = form.get("error_code")
        if code:
            try:
                return cls(error_code=int(code))
            except ValueError:
                return cls(error_code=POSITION_UNAVAILABLE)
        try:
            return cls(latitude=float(form["latitude"]), longitude=float(form["longitude"]))
        except (KeyError, ValueError):
            return cls(error_code=POSITION_UNAVAILABLE)

    def get_current_position(self) -> Tuple[float, float]:
        if self.error_code is not None:
            raise GeolocationError(self.error_code)
        if self.latitude is None or self.longitude is None:
            raise GeolocationError(POSITION_UNAVAILABLE)
        return self.latitude, self.longitude
