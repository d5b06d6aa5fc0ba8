from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .farms.mysql_farm_repository import MySQLFarmRepository
from .farms.repository import FarmRepository
from .farms.service import FarmService
from .payroll.service import PayrollReportService
from .service_types.mysql_service_type_repository import MySQLServiceTypeRepository
from .service_types.repository import ServiceTypeRepository
from .service_types.service import ServiceTypeService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import WorkerService
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    farms_repo: FarmRepository
    service_types_repo: ServiceTypeRepository
    workers_repo: WorkerRepository
    work_logs_repo: WorkLogRepository

    auth_service: AuthService
    user_service: UserService
    farm_service: FarmService
    service_type_service: ServiceTypeService
    worker_service: WorkerService
    work_log_service: WorkLogService
    payroll_report_service: PayrollReportService


def wire(
    *,
    users_repo: UserRepository,
    farms_repo: FarmRepository,
    service_types_repo: ServiceTypeRepository,
    workers_repo: WorkerRepository,
    work_logs_repo: WorkLogRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the services on top of any set of repositories (MySQL or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        farms_repo=farms_repo,
        service_types_repo=service_types_repo,
        workers_repo=workers_repo,
        work_logs_repo=work_logs_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        farm_service=FarmService(farms_repo),
        service_type_service=ServiceTypeService(service_types_repo),
        worker_service=WorkerService(workers_repo),
        work_log_service=WorkLogService(work_logs_repo),
        payroll_report_service=PayrollReportService(work_logs_repo, workers_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        farms_repo=MySQLFarmRepository(conn),
        service_types_repo=MySQLServiceTypeRepository(conn),
        workers_repo=MySQLWorkerRepository(conn),
        work_logs_repo=MySQLWorkLogRepository(conn),
    )
