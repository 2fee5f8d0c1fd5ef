"""
Profile Views

프로필 조회/수정, 업로드 파일 URL API (Thin Controller)
"""

from common.permissions import IsJobSeeker, IsRecruiter
from common.responses import api_response
from drf_spectacular.utils import OpenApiTypes, extend_schema
from profiles.models import JobSeekerProfile
from profiles.serializers import (
    JobSeekerProfileSerializer,
    JobSeekerProfileUpdateSerializer,
    RecruiterProfileSerializer,
    RecruiterProfileUpdateSerializer,
)
from profiles.services import ProfileService
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from user.serializers import UserSummarySerializer


def _profile_payload(user, profile) -> dict:
    if profile is None:
        profile_data = None
    elif isinstance(profile, JobSeekerProfile):
        profile_data = JobSeekerProfileSerializer(profile).data
    else:
        profile_data = RecruiterProfileSerializer(profile).data
    return {"user": UserSummarySerializer(user).data, "profile": profile_data}


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        profile = ProfileService.get_profile(request.user)
        return api_response(
            _profile_payload(request.user, profile),
            message="Profile retrieved successfully",
        )


class JobSeekerProfileUpdateView(APIView):
    permission_classes = [IsJobSeeker]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        request={"multipart/form-data": JobSeekerProfileUpdateSerializer},
        responses={200: OpenApiTypes.OBJECT},
    )
    def put(self, request):
        serializer = JobSeekerProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        profile_photo = data.pop("profile_photo", None)
        resume = data.pop("resume", None)
        profile = ProfileService.update_job_seeker_profile(
            request.user, data, profile_photo=profile_photo, resume=resume
        )
        return api_response(
            _profile_payload(request.user, profile),
            message="Profile updated successfully",
        )


class RecruiterProfileUpdateView(APIView):
    permission_classes = [IsRecruiter]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        request={"multipart/form-data": RecruiterProfileUpdateSerializer},
        responses={200: OpenApiTypes.OBJECT},
    )
    def put(self, request):
        serializer = RecruiterProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        profile_photo = data.pop("profile_photo", None)
        profile = ProfileService.update_recruiter_profile(
            request.user, data, profile_photo=profile_photo
        )
        return api_response(
            _profile_payload(request.user, profile),
            message="Profile updated successfully",
        )


class ProfileFileDownloadView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request, file_type: str, file_name: str):
        url = ProfileService.resolve_download_url(request.user, file_type, file_name)
        return api_response({"url": url}, message="File located")
