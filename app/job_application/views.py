"""
Job Application Views

지원/지원자 관리 API 엔드포인트 (Thin Controller)
"""

import logging

from common.permissions import IsJobSeeker, IsRecruiter
from common.responses import api_response
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job.services import JobPostActivityService
from job_application.serializers import (
    ApplicationStatusUpdateSerializer,
    JobApplySerializer,
    JobSeekerApplySerializer,
)
from job_application.services import JobSeekerApplyService
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

logger = logging.getLogger(__name__)

STATUS_FILTER = OpenApiParameter(
    "status", OpenApiTypes.STR, description="지원 상태 필터 (예: APPLIED)"
)


class ApplyForJobView(APIView):
    permission_classes = [IsJobSeeker]

    @extend_schema(request=JobApplySerializer, responses={201: JobSeekerApplySerializer})
    def post(self, request, job_id: int):
        serializer = JobApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = JobSeekerApplyService.apply_for_job(
            request.user, job_id, **serializer.validated_data
        )
        return api_response(
            JobSeekerApplySerializer(application).data,
            message="Application submitted successfully",
            status=status.HTTP_201_CREATED,
        )


class MyApplicationsView(APIView):
    permission_classes = [IsJobSeeker]

    @extend_schema(responses={200: JobSeekerApplySerializer(many=True)})
    def get(self, request):
        applications = JobSeekerApplyService.get_candidates_jobs(request.user)
        data = JobSeekerApplySerializer(applications, many=True).data
        return api_response(data, message="Applications retrieved successfully")


class WithdrawApplicationView(APIView):
    permission_classes = [IsJobSeeker]

    @extend_schema(request=None, responses={200: JobSeekerApplySerializer})
    def put(self, request, pk: int):
        application = JobSeekerApplyService.withdraw(request.user, pk)
        return api_response(
            JobSeekerApplySerializer(application).data,
            message="Application withdrawn successfully",
        )


class ApplicationStatusForJobView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request, job_id: int):
        job = JobPostActivityService.get_one(job_id)
        has_applied = JobSeekerApplyService.has_applied(request.user, job.id)
        return api_response(
            {"has_applied": has_applied}, message="Application status retrieved"
        )


class RecruiterApplicationsView(APIView):
    permission_classes = [IsRecruiter]

    @extend_schema(
        parameters=[STATUS_FILTER],
        responses={200: JobSeekerApplySerializer(many=True)},
    )
    def get(self, request):
        applications = JobSeekerApplyService.get_applications_for_recruiter(
            request.user, status=request.query_params.get("status")
        )
        data = JobSeekerApplySerializer(applications, many=True).data
        return api_response(data, message="Applications retrieved successfully")


class JobApplicationsView(APIView):
    permission_classes = [IsRecruiter]

    @extend_schema(
        parameters=[STATUS_FILTER],
        responses={200: JobSeekerApplySerializer(many=True)},
    )
    def get(self, request, job_id: int):
        applications = JobSeekerApplyService.get_job_candidates(
            request.user, job_id, status=request.query_params.get("status")
        )
        data = JobSeekerApplySerializer(applications, many=True).data
        return api_response(data, message="Applications retrieved successfully")


class UpdateApplicationStatusView(APIView):
    permission_classes = [IsRecruiter]

    @extend_schema(
        request=ApplicationStatusUpdateSerializer,
        responses={200: JobSeekerApplySerializer},
    )
    def put(self, request, pk: int):
        serializer = ApplicationStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = JobSeekerApplyService.update_status(
            request.user,
            pk,
            status=serializer.validated_data["status"],
            recruiter_notes=serializer.validated_data.get("recruiter_notes"),
        )
        return api_response(
            JobSeekerApplySerializer(application).data,
            message="Application status updated successfully",
        )


class RecruiterStatisticsView(APIView):
    permission_classes = [IsRecruiter]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        statistics = JobSeekerApplyService.get_statistics_for_recruiter(request.user)
        return api_response(
            statistics.as_payload(), message="Statistics retrieved successfully"
        )


class RecruiterRecentApplicationsView(APIView):
    permission_classes = [IsRecruiter]

    @extend_schema(responses={200: JobSeekerApplySerializer(many=True)})
    def get(self, request):
        applications = JobSeekerApplyService.get_recent_applications_for_recruiter(
            request.user
        )
        data = JobSeekerApplySerializer(applications, many=True).data
        return api_response(data, message="Recent applications retrieved successfully")


class ApplicationDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: JobSeekerApplySerializer})
    def get(self, request, pk: int):
        application = JobSeekerApplyService.get_application(request.user, pk)
        return api_response(
            JobSeekerApplySerializer(application).data,
            message="Application retrieved successfully",
        )


class ApplicationStatusChoicesView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return api_response(
            JobSeekerApplyService.status_choices(), message="Statuses retrieved"
        )
