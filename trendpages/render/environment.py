from jinja2 import Environment, PackageLoader, StrictUndefined

_env = None


def get_environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("trendpages", "templates"),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
    return _env
