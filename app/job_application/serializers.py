from drf_spectacular.utils import extend_schema_field
from job_application.models import ApplicationStatus, JobSeekerApply
from rest_framework import serializers

DEFAULT_COMPANY_NAME = "Company"


class JobApplySerializer(serializers.Serializer):
    cover_letter = serializers.CharField(required=False, allow_blank=True, default="")
    resume_path = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )


class ApplicationStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ApplicationStatus.values)
    recruiter_notes = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )

    def to_internal_value(self, data):
        # 소문자 상태값도 허용
        if hasattr(data, "copy") and isinstance(data.get("status"), str):
            data = data.copy()
            data["status"] = data["status"].strip().upper()
        return super().to_internal_value(data)


class JobSeekerApplySerializer(serializers.ModelSerializer):
    """지원 내역 응답 (구직자/Recruiter 공용)"""

    job_id = serializers.IntegerField(source="job.id", read_only=True)
    job_title = serializers.CharField(source="job.job_title", read_only=True)
    company_name = serializers.SerializerMethodField()
    job_location = serializers.SerializerMethodField()
    applicant_name = serializers.SerializerMethodField()
    applicant_email = serializers.EmailField(
        source="job_seeker.user.email", read_only=True
    )
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = JobSeekerApply
        fields = [
            "id",
            "job_id",
            "job_title",
            "company_name",
            "job_location",
            "applicant_name",
            "applicant_email",
            "cover_letter",
            "status",
            "status_display",
            "apply_date",
            "last_updated",
            "recruiter_notes",
            "resume_path",
        ]

    def get_company_name(self, obj) -> str:
        return obj.job.company_name or DEFAULT_COMPANY_NAME

    @extend_schema_field(serializers.CharField(allow_null=True))
    def get_job_location(self, obj):
        location = obj.job.job_location
        if location is None:
            return None
        return ", ".join(part for part in (location.city, location.state) if part)

    def get_applicant_name(self, obj) -> str:
        profile = obj.job_seeker
        name = profile.full_name
        if name:
            return name
        user = profile.user
        return f"{user.first_name} {user.last_name}".strip() or user.email
