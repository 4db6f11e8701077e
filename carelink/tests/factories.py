"""
Test data factories for domain aggregates.

Each factory builds a valid aggregate through its public creation path;
keyword arguments override the defaults.
"""

from datetime import date
from uuid import UUID, uuid4

from carelink.domain.child import BirthDate, Child, ChildName, ChildType, Gender
from carelink.domain.counsel_report import CounselReport, ReportStatus
from carelink.domain.counsel_request import CareType, CounselRequest, CounselRequestStatus
from carelink.domain.institution import Address, CareFacility, InstitutionName
from carelink.domain.review import Rating, Review, ReviewContent
from carelink.domain.user import (
    Email,
    Password,
    PasswordHasher,
    PhoneNumber,
    RealName,
    User,
    UserRole,
)

from carelink.tests.fakes import PlainTextHasher

REVIEW_TEXT = "선생님들이 아이를 정말 세심하게 돌봐주십니다."


def build_facility(name: str = "해피양육시설", capacity: int = 50) -> CareFacility:
    return CareFacility.create(
        name=InstitutionName.create(name).value,
        address=Address.create("서울특별시 강남구 테헤란로 123", "3층", "06234").value,
        representative_name="김철수",
        phone_number="02-1234-5678",
        capacity=capacity,
        established_date=date(2015, 3, 15),
        today=date(2024, 1, 1),
    ).value


def build_user(
    email: str = "guardian@example.com",
    password: str = "Secur3!pw",
    role: UserRole = UserRole.GUARDIAN,
    hasher: PasswordHasher | None = None,
) -> User:
    hasher = hasher or PlainTextHasher()
    return User.create(
        email=Email.create(email).value,
        password=Password.create(password).value.hash(hasher),
        real_name=RealName.create("홍길동").value,
        phone_number=PhoneNumber.create("010-1234-5678").value,
        role=role,
    ).value


def build_child(
    guardian_id: UUID | None = None,
    institution_id: UUID | None = None,
    birth_date: date = date(2015, 5, 1),
    name: str = "김민수",
) -> Child:
    if institution_id is not None:
        child_type = ChildType.CARE_FACILITY
    else:
        child_type = ChildType.REGULAR
        guardian_id = guardian_id or uuid4()
    return Child.create(
        child_type=child_type,
        name=ChildName.create(name).value,
        birth_date=BirthDate.restore(birth_date),
        gender=Gender.MALE,
        guardian_id=guardian_id,
        institution_id=institution_id,
    ).value


def build_review(
    user_id: UUID | None = None,
    institution_id: UUID | None = None,
    rating: int = 4,
    content: str = REVIEW_TEXT,
) -> Review:
    return Review.create(
        institution_id or uuid4(),
        user_id or uuid4(),
        Rating.create(rating).value,
        ReviewContent.create(content).value,
    ).value


def build_report(
    child_id: UUID | None = None,
    counselor_id: UUID | None = None,
    institution_id: UUID | None = None,
    counsel_request_id: UUID | None = None,
    session_number: int = 1,
    status: ReportStatus = ReportStatus.DRAFT,
) -> CounselReport:
    """Draft report, advanced along the lifecycle up to ``status``."""
    report = CounselReport.create(
        counsel_request_id=counsel_request_id or uuid4(),
        child_id=child_id or uuid4(),
        counselor_id=counselor_id or uuid4(),
        institution_id=institution_id or uuid4(),
        session_number=session_number,
        report_date=date(2024, 3, 1),
        center_name="마음숲 상담센터",
        counsel_reason="또래 관계 어려움",
        counsel_content="놀이치료를 통해 감정 표현을 연습했습니다.",
    ).value

    if status in (ReportStatus.SUBMITTED, ReportStatus.REVIEWED, ReportStatus.APPROVED):
        report.submit()
    if status in (ReportStatus.REVIEWED, ReportStatus.APPROVED):
        report.mark_as_reviewed()
    if status == ReportStatus.APPROVED:
        report.approve_with_feedback("감사합니다")
    report.clear_domain_events()
    return report


def build_counsel_request(
    child_id: UUID | None = None,
    guardian_id: UUID | None = None,
    institution_id: UUID | None = None,
    counselor_id: UUID | None = None,
    status: CounselRequestStatus = CounselRequestStatus.PENDING,
) -> CounselRequest:
    """Pending request, advanced along the direct-match path up to ``status``."""
    request = CounselRequest.create(
        child_id=child_id or uuid4(),
        guardian_id=guardian_id or uuid4(),
        center_name="마음숲 상담센터",
        counselor_name="이상담",
        child_name="김민수",
        care_type=CareType.GENERAL,
        request_date=date(2024, 2, 20),
        motivation="학교 적응에 어려움을 겪고 있습니다.",
    ).value

    if status == CounselRequestStatus.RECOMMENDED:
        request.mark_as_recommended()
    if status in (
        CounselRequestStatus.MATCHED,
        CounselRequestStatus.IN_PROGRESS,
        CounselRequestStatus.COMPLETED,
    ):
        request.match_with(institution_id or uuid4(), counselor_id or uuid4())
    if status in (CounselRequestStatus.IN_PROGRESS, CounselRequestStatus.COMPLETED):
        request.start_counseling()
    if status == CounselRequestStatus.COMPLETED:
        request.complete_counseling()
    if status == CounselRequestStatus.REJECTED:
        request.reject("정원 초과")
    request.clear_domain_events()
    return request
