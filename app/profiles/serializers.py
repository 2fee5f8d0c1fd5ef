from profiles.models import JobSeekerProfile, RecruiterProfile
from rest_framework import serializers


class JobSeekerProfileSerializer(serializers.ModelSerializer):
    photos_image_path = serializers.CharField(read_only=True)

    class Meta:
        model = JobSeekerProfile
        exclude = ["user", "created_at"]


class RecruiterProfileSerializer(serializers.ModelSerializer):
    photos_image_path = serializers.CharField(read_only=True)

    class Meta:
        model = RecruiterProfile
        exclude = ["user", "created_at"]


class JobSeekerProfileUpdateSerializer(serializers.Serializer):
    """
    구직자 프로필 수정 요청 (multipart)

    모든 필드는 선택이며, 빈 값은 기존 값을 유지합니다.
    날짜는 문자열로 받아 서비스에서 ISO 형식으로 해석합니다.
    """

    first_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    last_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=30)
    date_of_birth = serializers.CharField(required=False, allow_blank=True)
    gender = serializers.CharField(required=False, allow_blank=True, max_length=30)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)
    willing_to_relocate = serializers.CharField(required=False, allow_blank=True)
    current_job_title = serializers.CharField(
        required=False, allow_blank=True, max_length=200
    )
    experience = serializers.CharField(required=False, allow_blank=True)
    education = serializers.CharField(required=False, allow_blank=True)
    work_authorization = serializers.CharField(
        required=False, allow_blank=True, max_length=100
    )
    employment_type = serializers.CharField(
        required=False, allow_blank=True, max_length=50
    )
    expected_salary = serializers.CharField(
        required=False, allow_blank=True, max_length=100
    )
    availability_date = serializers.CharField(required=False, allow_blank=True)
    linkedin_profile = serializers.CharField(
        required=False, allow_blank=True, max_length=255
    )
    github_profile = serializers.CharField(
        required=False, allow_blank=True, max_length=255
    )
    portfolio_website = serializers.CharField(
        required=False, allow_blank=True, max_length=255
    )
    cover_letter = serializers.CharField(required=False, allow_blank=True)
    profile_photo = serializers.FileField(required=False)
    resume = serializers.FileField(required=False)


class RecruiterProfileUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    last_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    company = serializers.CharField(required=False, allow_blank=True, max_length=200)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)
    profile_photo = serializers.FileField(required=False)
