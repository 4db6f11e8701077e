"""Use cases, one class per operation."""

from carelink.application.use_cases.base import UseCase
from carelink.application.use_cases.child_use_cases import GetChildrenByGuardianUseCase, RegisterChildUseCase
from carelink.application.use_cases.counsel_report_use_cases import (
    ApproveCounselReportUseCase,
    CreateCounselReportUseCase,
    GetCounselorReportsUseCase,
    GetCounselReportsByRequestUseCase,
    GetCounselReportUseCase,
    RejectCounselReportUseCase,
    ReviewCounselReportUseCase,
    SubmitCounselReportUseCase,
    UpdateCounselReportUseCase,
)
from carelink.application.use_cases.counsel_request_use_cases import (
    CompleteCounselingUseCase,
    CreateCounselRequestUseCase,
    GetCounselRequestsByChildUseCase,
    GetCounselRequestUseCase,
    ListCounselRequestsByStatusUseCase,
    MarkCounselRequestRecommendedUseCase,
    MatchCounselRequestUseCase,
    RejectCounselRequestUseCase,
    SelectInstitutionUseCase,
    StartCounselingUseCase,
)
from carelink.application.use_cases.institution_use_cases import (
    CreateCareFacilityUseCase,
    GetCareFacilityUseCase,
    ListCareFacilitiesUseCase,
    UpdateCareFacilityUseCase,
)
from carelink.application.use_cases.review_use_cases import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListInstitutionReviewsUseCase,
    MarkReviewHelpfulUseCase,
    UpdateReviewUseCase,
)
from carelink.application.use_cases.user_use_cases import (
    AuthenticateUserUseCase,
    ChangePasswordUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "UseCase",
    "GetChildrenByGuardianUseCase",
    "RegisterChildUseCase",
    "ApproveCounselReportUseCase",
    "CreateCounselReportUseCase",
    "GetCounselorReportsUseCase",
    "GetCounselReportsByRequestUseCase",
    "GetCounselReportUseCase",
    "RejectCounselReportUseCase",
    "ReviewCounselReportUseCase",
    "SubmitCounselReportUseCase",
    "UpdateCounselReportUseCase",
    "CompleteCounselingUseCase",
    "CreateCounselRequestUseCase",
    "GetCounselRequestsByChildUseCase",
    "GetCounselRequestUseCase",
    "ListCounselRequestsByStatusUseCase",
    "MarkCounselRequestRecommendedUseCase",
    "MatchCounselRequestUseCase",
    "RejectCounselRequestUseCase",
    "SelectInstitutionUseCase",
    "StartCounselingUseCase",
    "CreateCareFacilityUseCase",
    "GetCareFacilityUseCase",
    "ListCareFacilitiesUseCase",
    "UpdateCareFacilityUseCase",
    "CreateReviewUseCase",
    "DeleteReviewUseCase",
    "GetReviewUseCase",
    "ListInstitutionReviewsUseCase",
    "MarkReviewHelpfulUseCase",
    "UpdateReviewUseCase",
    "AuthenticateUserUseCase",
    "ChangePasswordUseCase",
    "RegisterUserUseCase",
]
