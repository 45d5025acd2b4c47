"""
Wide event logging: one structured JSON line per request.

Views enrich the event through `request._wide_event['extra']`; everything
ends up in a single log record emitted on the `wide_event` logger once the
response (or the exception) is known.
"""
import json
import logging
import time
import uuid

logger = logging.getLogger('wide_event')


class WideEventLoggingMiddleware:

  def __init__(self, get_response):
    self.get_response = get_response

  def __call__(self, request):
    started = time.monotonic()
    request._wide_event = {
      'request_id': request.headers.get('X-Request-ID') or uuid.uuid4().hex,
      'method': request.method,
      'path': request.path,
      'htmx': request.headers.get('HX-Request') == 'true',
      'extra': {},
    }

    try:
      response = self.get_response(request)
    except Exception as e:
      self._emit(request, started, status=500, error=f'{type(e).__name__}: {e}')
      raise

    self._emit(request, started, status=response.status_code)
    response['X-Request-ID'] = request._wide_event['request_id']
    return response

  def _emit(self, request, started, status, error=None):
    event = request._wide_event
    event['status'] = status
    event['duration_ms'] = round((time.monotonic() - started) * 1000, 2)

    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
      event['user'] = user.subname

    if error:
      event['error'] = error
      logger.error(json.dumps(event, default=str))
    elif status >= 500:
      logger.error(json.dumps(event, default=str))
    elif status >= 400:
      logger.warning(json.dumps(event, default=str))
    else:
      logger.info(json.dumps(event, default=str))
