"""Example: payroll report through the service layer (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
import json
import sys

from farm_office.container import build_container
from farm_office.settings import get_settings_module


def main():
    start = sys.argv[1] if len(sys.argv) > 1 else "2025-08-01"
    end = sys.argv[2] if len(sys.argv) > 2 else "2025-08-31"
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    service = container.payroll_report_service
    payroll = service.build_payroll(start=start, end=end, category_filter="todos")
    print(json.dumps(service.to_json(payroll), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
