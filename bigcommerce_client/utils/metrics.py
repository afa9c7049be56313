# bigcommerce_client/utils/metrics.py
from prometheus_client import Counter

# Prometheus metrics
API_REQUESTS_TOTAL = Counter('bigcommerce_api_requests_total', 'Total number of BigCommerce API requests', ['method'])
API_ERRORS_TOTAL = Counter('bigcommerce_api_errors_total', 'Total number of BigCommerce API errors', ['resource'])
