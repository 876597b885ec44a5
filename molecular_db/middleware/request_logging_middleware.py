import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from molecular_db.utils.helpers import logger

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log method, path, status and latency of every request"""
    
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        endpoint_path = request.url.path
        method = request.method
        
        try:
            response = await call_next(request)
        except Exception as e:
            response_time_ms = int((time.time() - start_time) * 1000)
            logger.error(f"{method} {endpoint_path} - 500 - {response_time_ms}ms - {self._get_client_ip(request)} - {str(e)}")
            raise
        
        response_time_ms = int((time.time() - start_time) * 1000)
        logger.info(f"{method} {endpoint_path} - {response.status_code} - {response_time_ms}ms - {self._get_client_ip(request)}")
        return response
    
    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request"""
        # Check for forwarded headers first
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip
        
        return request.client.host if request.client else "unknown"
