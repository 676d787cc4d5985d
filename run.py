#!/usr/bin/env python3
"""
Hold'em - Startup Script

Usage:
    python run.py play [--seed SEED] [--players N] [--chips N]
    python run.py serve [--host HOST] [--port PORT] [--reload]
"""

from holdem.cli import main


if __name__ == "__main__":
    main()
