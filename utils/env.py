import os


def get(name, default=None, cast=None):
    value = os.getenv(name, default)
    if cast and value is not None:
        try:
            value = cast(value)
        except ValueError:
            raise EnvironmentError(f'Environment variable {name} has an invalid value: {value!r}')
    return value


def require(name, cast=None):
    value = get(name, cast=cast)
    if value is None:
        raise EnvironmentError(f'Environment variable {name} is required')
    return value
