"""
Saved Job Views

관심 공고 목록 API (Thin Controller)
"""

from common.exceptions import ValidationFailed
from common.permissions import IsJobSeeker
from common.responses import api_response
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job_application.services import JobSeekerApplyService
from pydantic import ValidationError as PydanticValidationError
from rest_framework.views import APIView
from saved_job.dtos import SavedJobFilter
from saved_job.serializers import SavedJobSerializer
from saved_job.services import JobSeekerSaveService


class SavedJobListView(APIView):
    permission_classes = [IsJobSeeker]

    @extend_schema(
        parameters=[
            OpenApiParameter("search", OpenApiTypes.STR),
            OpenApiParameter("type", OpenApiTypes.STR),
            OpenApiParameter("remote", OpenApiTypes.STR),
            OpenApiParameter("sortBy", OpenApiTypes.STR),
            OpenApiParameter("sortOrder", OpenApiTypes.STR),
        ],
        responses={200: SavedJobSerializer(many=True)},
    )
    def get(self, request):
        params = request.query_params
        try:
            filters = SavedJobFilter(
                search=params.get("search"),
                job_type=params.get("type"),
                remote=params.get("remote"),
                sort_by=params.get("sortBy") or "saved_at",
                sort_order=params.get("sortOrder") or "desc",
            )
        except PydanticValidationError as e:
            raise ValidationFailed(detail=[error["msg"] for error in e.errors()])

        saved_jobs = list(JobSeekerSaveService.list_saved_jobs(request.user, filters))
        applied_job_ids = JobSeekerApplyService.applied_job_ids(
            request.user, [saved.job_id for saved in saved_jobs]
        )
        data = SavedJobSerializer(
            saved_jobs, many=True, context={"applied_job_ids": applied_job_ids}
        ).data
        return api_response(data, message="Saved jobs retrieved successfully")


class SavedJobCountView(APIView):
    permission_classes = [IsJobSeeker]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        count = JobSeekerSaveService.count(request.user)
        return api_response({"count": count}, message="Saved jobs count retrieved")
