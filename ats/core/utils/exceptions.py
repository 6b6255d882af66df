from rest_framework.views import exception_handler


def _flatten_detail(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _flatten_detail(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _flatten_detail(detail[0]) if detail else ''
    return str(detail)


def message_exception_handler(exc, context):
    """
    DRF exception handler that always exposes a human readable `message`
    alongside the usual error detail, the shape the dashboard client reads.
    """
    response = exception_handler(exc, context)
    if response is None:
        return response

    data = response.data
    if isinstance(data, dict):
        if 'message' not in data:
            data['message'] = _flatten_detail(data.get('detail', data))
    else:
        response.data = {
            'message': _flatten_detail(data),
            'errors': data
        }
    return response
