"""
API Middleware - Request/response processing

Exception handlers that turn domain and validation errors into JSON responses.
"""
