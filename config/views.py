import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe, no authentication required."""
    return JsonResponse({
        'status': 'healthy',
        'service': 'kgl-produce-trading-api',
    })


def error_404(request, exception):
    """Unknown route; same ``{"error": ...}`` shape as other API errors."""
    return JsonResponse({
        'error': f'Cannot {request.method} {request.path}',
    }, status=404)


def error_500(request):
    logger.error("Unhandled error on %s %s", request.method, request.path)
    return JsonResponse({
        'error': 'Internal server error',
    }, status=500)
