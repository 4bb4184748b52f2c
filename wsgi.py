"""
WSGI Entry Point for Gunicorn

    gunicorn wsgi:app
"""
import os

from app_init import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
