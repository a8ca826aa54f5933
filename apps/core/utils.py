"""Small request helpers shared by views."""
from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address


def _valid_ip(value):
    if not value:
        return None
    try:
        validate_ipv46_address(value)
    except ValidationError:
        return None
    return value


def client_ip(request):
    """
    Origin address of a request, honouring the first X-Forwarded-For hop.

    Values that are not an IPv4/IPv6 address (``unknown``, ``host:port``)
    are ignored.
    """
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        ip = _valid_ip(forwarded.split(',')[0].strip())
        if ip:
            return ip
    return _valid_ip(request.META.get('REMOTE_ADDR'))
