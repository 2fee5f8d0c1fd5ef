from job.serializers import JobPostActivitySerializer
from rest_framework import serializers
from saved_job.models import JobSeekerSave


class SavedJobSerializer(serializers.ModelSerializer):
    """
    저장한 공고 응답

    is_applied 는 context["applied_job_ids"] 로 계산합니다.
    """

    job = JobPostActivitySerializer(read_only=True)
    is_saved = serializers.SerializerMethodField()
    is_applied = serializers.SerializerMethodField()

    class Meta:
        model = JobSeekerSave
        fields = ["id", "saved_at", "job", "is_saved", "is_applied"]

    def get_is_saved(self, obj) -> bool:
        return True

    def get_is_applied(self, obj) -> bool:
        return obj.job_id in self.context.get("applied_job_ids", set())
