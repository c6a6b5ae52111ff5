#!/usr/bin/env python3
"""
run_service.py

Скрипт запуска сервиса доставки. Строит подключение к MySQL из
переменных окружения и завершается с ненулевым кодом, если их нет:

    python run_service.py
"""

import sys

from src.shipping_service.bootstrap import main


if __name__ == "__main__":
    sys.exit(main())
