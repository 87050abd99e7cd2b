"""
Main application entry point.
"""
from profile_lookup import create_app

app = create_app()


if __name__ == '__main__':
    # For development
    app.run(host='0.0.0.0', port=5000, debug=True)
