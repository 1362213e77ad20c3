#!/usr/bin/env python3
"""
Community Resource Proxy - Run Script
Starts the FastAPI places proxy under uvicorn
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def has_api_key():
    """True when the key is set in the environment or in a .env file"""
    if os.environ.get("GOOGLE_MAPS_API_KEY"):
        return True
    for env_path in (Path(".env"), Path("../.env")):
        if env_path.exists() and "GOOGLE_MAPS_API_KEY=" in env_path.read_text(encoding="utf-8"):
            return True
    return False

def server_command(config):
    """uvicorn command line for the proxy, bound where the settings say"""
    return [
        sys.executable, "-m", "uvicorn",
        "places_proxy.main:app",
        "--reload",
        "--host", config.HOST,
        "--port", str(config.PORT)
    ]

def main():
    print_colored("🚀 Starting Community Resource Proxy...", "blue")

    check_file_exists("places_proxy/main.py", "places_proxy/main.py not found. Please run this script from the backend directory.")

    if not has_api_key():
        print_colored("⚠️  Warning: GOOGLE_MAPS_API_KEY is not configured.", "yellow")
        print("Create a .env file in the project root with:")
        print("  GOOGLE_MAPS_API_KEY=your_api_key_here")
        print("  PORT=3001")
        print()
        response = input("Continue anyway? (y/N): ").strip().lower()
        if response != 'y':
            sys.exit(1)

    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi
        import uvicorn
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Install them from the project root with:")
        print("  pip install -e .")
        sys.exit(1)

    from places_proxy.core.config import settings
    port = settings.PORT

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Proxy will be available at: http://localhost:{port}")
    print(f"📍 Health check: http://localhost:{port}/health")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run(server_command(settings), check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Proxy server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
