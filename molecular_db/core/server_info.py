"""
Server runtime information module
"""
from datetime import datetime
from typing import Optional

# Global variable to store server start time
_server_start_time: Optional[datetime] = None

def set_server_start_time():
    """Set the server start time to current time"""
    global _server_start_time
    _server_start_time = datetime.utcnow()

def get_server_start_time() -> Optional[datetime]:
    """Get the server start time"""
    return _server_start_time

def get_server_uptime() -> Optional[str]:
    """Get server uptime as a human-readable string"""
    if _server_start_time is None:
        return None
    
    total_seconds = int((datetime.utcnow() - _server_start_time).total_seconds())
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    
    if days > 0:
        return f"{days}d {hours}h {minutes}m {seconds}s"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
