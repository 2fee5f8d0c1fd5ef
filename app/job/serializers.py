from job.models import JobCompany, JobLocation, JobPostActivity
from rest_framework import serializers


class JobCompanySerializer(serializers.ModelSerializer):
    class Meta:
        model = JobCompany
        fields = ["id", "name", "logo", "website"]


class JobLocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = JobLocation
        fields = ["id", "city", "state", "country"]


class JobLocationCreateSerializer(serializers.Serializer):
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100)


class JobCompanyCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    logo = serializers.CharField(max_length=255, required=False, allow_blank=True)
    website = serializers.CharField(max_length=255, required=False, allow_blank=True)


class PostedBySerializer(serializers.Serializer):
    user_id = serializers.IntegerField(source="id")
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.EmailField()


class JobPostActivitySerializer(serializers.ModelSerializer):
    """채용 공고 응답"""

    posted_by = PostedBySerializer(read_only=True)
    job_location = JobLocationSerializer(read_only=True)
    job_company = JobCompanySerializer(read_only=True)
    company_name = serializers.CharField(read_only=True)
    location = serializers.SerializerMethodField()

    class Meta:
        model = JobPostActivity
        fields = [
            "id",
            "job_title",
            "description_of_job",
            "job_type",
            "salary",
            "remote",
            "posted_date",
            "posted_by",
            "job_location",
            "job_company",
            "company_name",
            "location",
        ]

    def get_location(self, obj) -> str | None:
        return obj.job_location.display if obj.job_location_id else None


class RecruiterJobSerializer(JobPostActivitySerializer):
    total_candidates = serializers.IntegerField(read_only=True, default=0)

    class Meta(JobPostActivitySerializer.Meta):
        fields = JobPostActivitySerializer.Meta.fields + ["total_candidates"]


class JobPostWriteSerializer(serializers.Serializer):
    """채용 공고 생성/수정 요청"""

    job_title = serializers.CharField(max_length=200)
    description_of_job = serializers.CharField(max_length=5000)
    job_type = serializers.ChoiceField(choices=JobPostActivity.JOB_TYPES)
    salary = serializers.CharField(max_length=100)
    remote = serializers.ChoiceField(choices=JobPostActivity.REMOTE_OPTIONS)
    job_location_id = serializers.IntegerField(required=False, allow_null=True)
    job_company_id = serializers.IntegerField(required=False, allow_null=True)


class JobStatusSerializer(serializers.Serializer):
    already_applied = serializers.BooleanField()
    already_saved = serializers.BooleanField()
