"""
Error Handlers

Rendered error pages and the helper routes use to bounce back after a flash.
"""

from urllib.parse import urlparse

from flask import redirect, render_template, request, url_for

def render_error_page(title, message, status_code):
    """Render a user-friendly error page"""
    return render_template('error.html', title=title, message=message), status_code

def redirect_back(default='main.home'):
    """Redirect to the referring page when it is on this host, else to `default`"""
    referrer = request.referrer
    if referrer:
        parsed = urlparse(referrer)
        if not parsed.netloc or parsed.netloc == request.host:
            return redirect(referrer)
    return redirect(url_for(default))

def register_error_handlers(app):
    """Register error handlers with the Flask app"""
    
    @app.errorhandler(404)
    def not_found(error):
        return render_error_page('Page Not Found', 
            'The page you are looking for does not exist.', 404)
    
    @app.errorhandler(500)
    def internal_error(error):
        from ..models import db
        db.session.rollback()
        app.logger.error("Unhandled server error: %s", error)
        return render_error_page('Internal Server Error', 
            'Something went wrong on our end. Please try again later.', 500)
