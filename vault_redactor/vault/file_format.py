import re
from urllib.parse import parse_qs, unquote, urlparse

CONTENT_DISPOSITION_PARAM = "response-content-disposition"
_FILENAME_PATTERN = re.compile(r"filename=([^;]+)")


def infer_file_format(file_url: str) -> str | None:
    """Infer a lower-cased file extension from a signed download URL.

    The filename is taken from the ``response-content-disposition`` query
    parameter, e.g. ``attachment; filename=report.PDF`` gives ``"pdf"``.
    Returns None when the parameter or the filename is absent.
    """
    query = parse_qs(urlparse(file_url).query)
    values = query.get(CONTENT_DISPOSITION_PARAM)
    if not values:
        return None

    match = _FILENAME_PATTERN.search(values[0])
    if match is None:
        return None

    filename = unquote(match.group(1)).strip().strip('"')
    return filename.rsplit(".", 1)[-1].lower()
