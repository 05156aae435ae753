#!/usr/bin/env python3
"""
Startup script for the Site Walk backend
"""
from backend.app import create_app


def main():
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000)


if __name__ == '__main__':
    main()
