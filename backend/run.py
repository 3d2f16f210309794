#!/usr/bin/env python3
"""
Buildex Property Services - Run Script
Starts the FastAPI backend (nearby places + financial calculators)
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

def main():
    print_colored("🚀 Starting Buildex Property Services...", "blue")

    if not Path("buildex/main.py").exists():
        print_colored("❌ Error: buildex/main.py not found. Please run this script from the backend directory.", "red")
        sys.exit(1)

    if not Path(".env").exists() and not Path("../.env").exists():
        print_colored("⚠️  No .env file found, using default settings.", "yellow")
        print("Optional overrides:")
        print('  OVERPASS_ENDPOINTS=["https://overpass-api.de/api/interpreter"]')
        print("  OVERPASS_TIMEOUT_SECONDS=10")
        print("  PLACES_CACHE_TTL_SECONDS=300")
        print("  LOGGER=20")

    if not os.environ.get("VIRTUAL_ENV"):
        print_colored("⚠️  Virtual environment not activated.", "yellow")

    print_colored("🌐 Starting Uvicorn server...", "blue")
    print("📍 Backend will be available at: http://localhost:8000")
    print("📍 API Health check: http://localhost:8000/health")
    print("📍 API Documentation: http://localhost:8000/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "buildex.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8000"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
