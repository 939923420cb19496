"""Maps (origin, code) pairs to localized user-facing messages."""

from dataclasses import dataclass, field

from analysis_client.errors.exceptions import AnalysisError, AppError, ErrorOrigin
from analysis_client.errors.messages import GLOBAL_DEFAULTS, MESSAGES
from analysis_client.logging.logger import Log

FALLBACK_LOCALE = "zh-CN"


@dataclass(frozen=True)
class UserFacingError:
    """Classified error as shown to the user.

    ``cause`` is kept for logging only. It never reaches ``message`` and is
    left out of the repr and of equality.
    """

    origin: ErrorOrigin | None
    code: str
    message: str
    cause: BaseException | None = field(default=None, repr=False, compare=False)


def classify(
    origin: ErrorOrigin | str,
    code: str = "default",
    cause: BaseException | None = None,
    locale: str = FALLBACK_LOCALE,
) -> UserFacingError:
    """Resolve the message for ``(origin, code)`` in ``locale``.

    Falls back to the origin's default message for an unknown code and to the
    global default for an unknown origin. ``cause`` is carried on the result
    for logging and is never part of the message.
    """
    catalog = MESSAGES.get(locale) or MESSAGES[FALLBACK_LOCALE]
    resolved = _resolve_origin(origin)
    if resolved is None:
        global_default = GLOBAL_DEFAULTS.get(locale, GLOBAL_DEFAULTS[FALLBACK_LOCALE])
        return UserFacingError(origin=None, code=code, message=global_default, cause=cause)
    by_code = catalog[resolved]
    message = by_code.get(code) or by_code["default"]
    return UserFacingError(origin=resolved, code=code, message=message, cause=cause)


def classify_exception(exc: BaseException, locale: str = FALLBACK_LOCALE) -> UserFacingError:
    """Classify any exception and log its cause.

    Exceptions that are not ``AppError`` are treated as analysis failures.
    """
    app_error = exc if isinstance(exc, AppError) else AnalysisError(cause=exc)
    result = classify(app_error.origin, app_error.code, app_error.cause, locale)
    Log.exception(
        f"{app_error.origin.value} error ({app_error.code}): {result.message}",
        result.cause or exc,
    )
    return result


def _resolve_origin(origin: ErrorOrigin | str) -> ErrorOrigin | None:
    if isinstance(origin, ErrorOrigin):
        return origin
    try:
        return ErrorOrigin(origin)
    except ValueError:
        return None
