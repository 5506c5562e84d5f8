"""
Flask extensions initialization.
Extensions are created here and then initialized with the app in app.py.
"""

from flask_wtf.csrf import CSRFProtect

# Initialize CSRF Protection (also registers the csrf_token() template global)
csrf = CSRFProtect()
