"""
Job Posting Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

import logging

from common.exceptions import ValidationFailed
from common.permissions import IsJobSeeker, IsRecruiter
from common.responses import api_response
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job.dtos import JobSearchCriteria
from job.models import JobPostActivity
from job.serializers import (
    JobCompanyCreateSerializer,
    JobCompanySerializer,
    JobLocationCreateSerializer,
    JobLocationSerializer,
    JobPostActivitySerializer,
    JobPostWriteSerializer,
    JobStatusSerializer,
    RecruiterJobSerializer,
)
from job.services import JobDataService, JobPostActivityService
from job_application.serializers import JobApplySerializer, JobSeekerApplySerializer
from job_application.services import JobSeekerApplyService
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet
from saved_job.services import JobSeekerSaveService

logger = logging.getLogger(__name__)

SEARCH_PARAMETERS = [
    OpenApiParameter("job", OpenApiTypes.STR, description="제목 검색어"),
    OpenApiParameter("location", OpenApiTypes.STR, description="city/state/country"),
    OpenApiParameter("jobType", OpenApiTypes.STR, many=True, description="고용 형태"),
    OpenApiParameter("remote", OpenApiTypes.STR, many=True, description="원격 근무"),
    OpenApiParameter("days", OpenApiTypes.INT, description="최근 N일"),
]


def search_criteria_from_request(request) -> JobSearchCriteria:
    params = request.query_params
    try:
        return JobSearchCriteria(
            job=params.get("job"),
            location=params.get("location"),
            job_types=params.getlist("jobType"),
            remote=params.getlist("remote"),
            days=params.get("days") or None,
        )
    except PydanticValidationError as e:
        raise ValidationFailed(
            detail={
                ".".join(str(loc) for loc in error["loc"]): [error["msg"]]
                for error in e.errors()
            }
        )


class JobPostActivityViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobPostActivityService 에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    queryset = JobPostActivity.objects.all()
    serializer_class = JobPostActivitySerializer
    lookup_value_regex = r"\d+"

    public_actions = {"list", "retrieve", "search"}
    recruiter_actions = {
        "create",
        "update",
        "destroy",
        "create_form",
        "recruiter_jobs",
        "candidates",
    }
    job_seeker_actions = {"apply", "save_job", "unsave_job"}

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        if self.action in self.recruiter_actions:
            return [IsRecruiter()]
        if self.action in self.job_seeker_actions:
            return [IsJobSeeker()]
        return [IsAuthenticated()]

    @extend_schema(parameters=SEARCH_PARAMETERS)
    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회 (검색 조건이 있으면 검색)

        GET /api/jobs/
        """
        jobs = JobPostActivityService.search(search_criteria_from_request(request))
        data = self.get_serializer(jobs, many=True).data
        return api_response(data, message="Jobs retrieved successfully")

    @extend_schema(parameters=SEARCH_PARAMETERS)
    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request):
        """
        채용 공고 검색

        GET /api/jobs/search/
        """
        jobs = JobPostActivityService.search(search_criteria_from_request(request))
        data = self.get_serializer(jobs, many=True).data
        return api_response(data, message=f"Found {len(data)} jobs")

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 상세 조회 (Job Seeker 에게는 지원/저장 여부 포함)

        GET /api/jobs/<id>/
        """
        job = JobPostActivityService.get_one(int(pk))
        data = dict(self.get_serializer(job).data)
        if request.user.is_authenticated and request.user.is_job_seeker:
            data["applied"] = JobSeekerApplyService.has_applied(request.user, job.id)
            data["saved"] = JobSeekerSaveService.is_saved(request.user, job.id)
        return api_response(data, message="Job retrieved successfully")

    @extend_schema(request=JobPostWriteSerializer, responses={201: JobPostActivitySerializer})
    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성

        POST /api/jobs/
        """
        serializer = JobPostWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        job = JobPostActivityService.create(request.user, serializer.validated_data)
        return api_response(
            self.get_serializer(job).data,
            message="Job created successfully",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        methods=["GET"], responses={200: OpenApiTypes.OBJECT}, summary="Job form metadata"
    )
    @extend_schema(
        methods=["POST"],
        request=JobPostWriteSerializer,
        responses={201: JobPostActivitySerializer},
    )
    @action(detail=False, methods=["get", "post"], url_path="create")
    def create_form(self, request):
        """
        GET: 공고 등록 폼 메타데이터 / POST: 공고 생성

        /api/jobs/create/
        """
        if request.method == "POST":
            return self.create(request)
        metadata = JobPostActivityService.get_form_metadata()
        return api_response(metadata.model_dump(), message="Form data retrieved")

    @extend_schema(responses={200: RecruiterJobSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="recruiter")
    def recruiter_jobs(self, request):
        """
        Recruiter 본인 공고 목록

        GET /api/jobs/recruiter/
        """
        jobs = JobPostActivityService.get_recruiter_jobs(request.user)
        data = RecruiterJobSerializer(jobs, many=True).data
        return api_response(data, message="Recruiter jobs retrieved successfully")

    @extend_schema(request=JobPostWriteSerializer)
    def update(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 수정 (본인 공고만)

        PUT /api/jobs/<id>/
        """
        serializer = JobPostWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        job = JobPostActivityService.update(
            request.user, int(pk), serializer.validated_data
        )
        return api_response(self.get_serializer(job).data, message="Job updated successfully")

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 삭제 (본인 공고만)

        DELETE /api/jobs/<id>/
        """
        JobPostActivityService.delete(request.user, int(pk))
        return api_response(message="Job deleted successfully")

    @extend_schema(responses={200: JobStatusSerializer})
    @action(detail=True, methods=["get"], url_path="status")
    def job_status(self, request, pk=None):
        """
        현재 사용자의 지원/저장 여부

        GET /api/jobs/<id>/status/
        """
        job = JobPostActivityService.get_one(int(pk))
        data = JobStatusSerializer(
            {
                "already_applied": JobSeekerApplyService.has_applied(request.user, job.id),
                "already_saved": JobSeekerSaveService.is_saved(request.user, job.id),
            }
        ).data
        return api_response(data, message="Job status retrieved")

    @extend_schema(responses={200: JobSeekerApplySerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="candidates")
    def candidates(self, request, pk=None):
        """
        공고 지원자 목록 (본인 공고만)

        GET /api/jobs/<id>/candidates/
        """
        applications = JobSeekerApplyService.get_job_candidates(request.user, int(pk))
        data = JobSeekerApplySerializer(applications, many=True).data
        return api_response(data, message="Candidates retrieved successfully")

    @extend_schema(request=JobApplySerializer, responses={201: JobSeekerApplySerializer})
    @action(detail=True, methods=["post"], url_path="apply")
    def apply(self, request, pk=None):
        """
        공고 지원

        POST /api/jobs/<id>/apply/
        """
        serializer = JobApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = JobSeekerApplyService.apply_for_job(
            request.user, int(pk), **serializer.validated_data
        )
        return api_response(
            JobSeekerApplySerializer(application).data,
            message="Application submitted successfully",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=None, responses={201: OpenApiTypes.OBJECT})
    @action(detail=True, methods=["post"], url_path="save")
    def save_job(self, request, pk=None):
        """
        관심 공고 저장

        POST /api/jobs/<id>/save/
        """
        saved = JobSeekerSaveService.save_job(request.user, int(pk))
        return api_response(
            {"id": saved.id, "job_id": saved.job_id, "saved_at": saved.saved_at},
            message="Job saved successfully",
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["delete"], url_path="unsave")
    def unsave_job(self, request, pk=None):
        """
        관심 공고 해제

        DELETE /api/jobs/<id>/unsave/
        """
        JobSeekerSaveService.unsave_job(request.user, int(pk))
        return api_response(message="Job removed from saved jobs")


class JobLocationListCreateView(APIView):
    """
    근무지 목록 / 생성

    GET /api/locations/ (공개), POST /api/locations/ (인증 필요)
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(responses={200: JobLocationSerializer(many=True)})
    def get(self, request):
        data = JobLocationSerializer(JobDataService.list_locations(), many=True).data
        return api_response(data, message="Locations retrieved successfully")

    @extend_schema(request=JobLocationCreateSerializer, responses={201: JobLocationSerializer})
    def post(self, request):
        serializer = JobLocationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        location, created = JobDataService.get_or_create_location(**serializer.validated_data)
        return api_response(
            JobLocationSerializer(location).data,
            message="Location created successfully" if created else "Location already exists",
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class JobLocationSearchView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter("city", OpenApiTypes.STR),
            OpenApiParameter("state", OpenApiTypes.STR),
            OpenApiParameter("country", OpenApiTypes.STR),
        ],
        responses={200: JobLocationSerializer(many=True)},
    )
    def get(self, request):
        params = request.query_params
        locations = JobDataService.search_locations(
            city=params.get("city"),
            state=params.get("state"),
            country=params.get("country"),
        )
        data = JobLocationSerializer(locations, many=True).data
        return api_response(data, message=f"Found {len(data)} locations")


class JobCompanyListCreateView(APIView):
    """
    회사 목록 / 생성

    GET /api/companies/ (공개), POST /api/companies/ (인증 필요)
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(responses={200: JobCompanySerializer(many=True)})
    def get(self, request):
        data = JobCompanySerializer(JobDataService.list_companies(), many=True).data
        return api_response(data, message="Companies retrieved successfully")

    @extend_schema(request=JobCompanyCreateSerializer, responses={201: JobCompanySerializer})
    def post(self, request):
        serializer = JobCompanyCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        company, created = JobDataService.get_or_create_company(**serializer.validated_data)
        return api_response(
            JobCompanySerializer(company).data,
            message="Company created successfully" if created else "Company already exists",
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class JobCompanySearchView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[OpenApiParameter("name", OpenApiTypes.STR, required=True)],
        responses={200: JobCompanySerializer(many=True)},
    )
    def get(self, request):
        name = request.query_params.get("name", "")
        if not name.strip():
            raise ValidationFailed("Query parameter 'name' is required")
        data = JobCompanySerializer(JobDataService.search_companies(name), many=True).data
        return api_response(data, message=f"Found {len(data)} companies")
