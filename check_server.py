#!/usr/bin/env python3
"""
Скрипт для проверки работоспособности сервера
"""
import sys
import argparse
import requests
from datetime import datetime

def check_endpoint(url, name, timeout=5):
    """Проверка доступности эндпоинта, возвращает (успех, ответ)"""
    try:
        start_time = datetime.now()
        response = requests.get(url, timeout=timeout)
        duration = (datetime.now() - start_time).total_seconds()

        status_code = response.status_code

        if status_code == 200:
            print(f"✅ {name}: OK (статус {status_code}, время {duration:.2f}с)")
            try:
                return True, response.json()
            except ValueError:
                print(f"⚠️ Ответ не является JSON: {response.text[:100]}")
                return True, None
        else:
            print(f"❌ {name}: ОШИБКА (статус {status_code}, время {duration:.2f}с)")
            print(f"  Ответ: {response.text[:200]}")
            return False, None
    except requests.exceptions.RequestException as e:
        print(f"❌ {name}: НЕДОСТУПЕН ({str(e)})")
        return False, None

def main(argv=None):
    """Основная функция"""
    parser = argparse.ArgumentParser(description="Проверка работоспособности сервера")
    parser.add_argument("--host", default="127.0.0.1", help="Хост для проверки")
    parser.add_argument("--port", type=int, default=8081, help="Порт приложения для проверки")
    parser.add_argument(
        "--publish",
        action="store_true",
        help="Вызвать /api/daily (документ действительно будет добавлен в Craft)"
    )
    args = parser.parse_args(argv)

    base_url = f"http://{args.host}:{args.port}"
    print(f"🔍 Проверка сервера на {base_url}\n")

    ok, health_data = check_endpoint(f"{base_url}/health", "Health Check")
    if health_data:
        print(f"  Статус: {health_data.get('status', 'не указан')}")

    if args.publish:
        # Публикация занимает два сетевых запроса, даем больше времени
        published, daily_data = check_endpoint(f"{base_url}/api/daily", "Daily Ritual", timeout=60)
        ok = ok and published
        if daily_data:
            moon = daily_data.get("moon", {})
            print(f"  Дата: {daily_data.get('dateLabel', 'не указана')}")
            print(f"  Луна: {moon.get('phaseName')} ({moon.get('illuminationPercent')}%)")
            print(f"  Погода: {daily_data.get('weather')}")
            print(f"  Таро: {daily_data.get('tarot', {}).get('name')}")
            print(f"  Ленорман: {daily_data.get('lenormand', {}).get('name')}")

    print("\n✨ Проверка завершена!")
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
