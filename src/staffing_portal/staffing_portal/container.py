from __future__ import annotations

from dataclasses import dataclass

from .attendance.repository import MonthlyAttendanceRepository, StoreAttendanceRepository, WorkShiftRepository
from .attendance.service import AttendanceService, ShiftService, StoreAttendanceService
from .candidates.document_candidate_repository import DocumentCandidateRepository
from .candidates.service import CandidateService
from .complaints.repository import TicketRepository
from .complaints.service import ComplaintService
from .core.constants import DEFAULT_DIRECT_CLIENT_REVENUE, DEFAULT_TEAM_SALARY
from .database.connection import DBConfig, DatabaseConnection
from .demo_requests.repository import DemoRequestRepository
from .demo_requests.service import DemoRequestService
from .documents.memory_store import InMemoryDocumentStore
from .documents.mysql_document_store import MySQLDocumentStore
from .documents.store import DocumentStore
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .jobs.repository import JobRepository
from .jobs.service import JobService
from .payroll.calculator.prorated_calculator import ProratedPayCalculator
from .payroll.repository import SalaryRuleRepository
from .payroll.service import SalaryRuleService
from .reports.commission.factory import CommissionStrategyFactory
from .reports.revenue import RevenueCalculator
from .requirements.document_requirement_repository import DocumentRequirementRepository
from .requirements.service import RequirementService
from .resignations.repository import ResignationRepository
from .resignations.service import ResignationService
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .supervisors.repository import SupervisorRepository
from .supervisors.service import SupervisorService
from .users.document_user_repository import DocumentUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: DocumentUserRepository
    candidates_repo: DocumentCandidateRepository
    requirements_repo: DocumentRequirementRepository

    auth_service: AuthService
    user_service: UserService
    job_service: JobService
    candidate_service: CandidateService
    complaint_service: ComplaintService
    requirement_service: RequirementService
    attendance_service: AttendanceService
    store_attendance_service: StoreAttendanceService
    shift_service: ShiftService
    settings_service: SettingsService
    supervisor_service: SupervisorService
    resignation_service: ResignationService
    demo_request_service: DemoRequestService
    employee_service: EmployeeService
    salary_rule_service: SalaryRuleService
    revenue_calculator: RevenueCalculator


def build_store(*, doc_store: str = "memory", db_config: dict | None = None) -> DocumentStore:
    if doc_store == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        return MySQLDocumentStore(conn)
    if doc_store != "memory":
        raise ValueError(f"Unknown DOC_STORE: {doc_store}")
    return InMemoryDocumentStore()


def build_container(
    *,
    store: DocumentStore,
    default_candidate_password: str = "password123",
    direct_client_revenue: float = DEFAULT_DIRECT_CLIENT_REVENUE,
    default_team_salary: float = DEFAULT_TEAM_SALARY,
) -> Container:
    users_repo = DocumentUserRepository(store)
    candidates_repo = DocumentCandidateRepository(store)
    requirements_repo = DocumentRequirementRepository(store)

    user_service = UserService(users_repo)
    candidate_service = CandidateService(candidates_repo, user_service, default_password=default_candidate_password)

    return Container(
        store=store,
        users_repo=users_repo,
        candidates_repo=candidates_repo,
        requirements_repo=requirements_repo,
        auth_service=AuthService(users_repo),
        user_service=user_service,
        job_service=JobService(JobRepository(store)),
        candidate_service=candidate_service,
        complaint_service=ComplaintService(TicketRepository(store)),
        requirement_service=RequirementService(requirements_repo),
        attendance_service=AttendanceService(
            MonthlyAttendanceRepository(store), calculator=ProratedPayCalculator()
        ),
        store_attendance_service=StoreAttendanceService(StoreAttendanceRepository(store), candidates_repo),
        shift_service=ShiftService(WorkShiftRepository(store)),
        settings_service=SettingsService(SettingsRepository(store)),
        supervisor_service=SupervisorService(SupervisorRepository(store)),
        resignation_service=ResignationService(ResignationRepository(store)),
        demo_request_service=DemoRequestService(DemoRequestRepository(store)),
        employee_service=EmployeeService(EmployeeRepository(store), candidates_repo),
        salary_rule_service=SalaryRuleService(SalaryRuleRepository(store)),
        revenue_calculator=RevenueCalculator(
            factory=CommissionStrategyFactory(),
            direct_client_revenue=direct_client_revenue,
            default_team_salary=default_team_salary,
        ),
    )
