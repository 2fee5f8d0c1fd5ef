"""
Saved Job Service

구직자의 관심 공고 저장/해제/목록 서비스
"""

import logging

from common.exceptions import Conflict, NotFound
from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet
from job.services import JobPostActivityService
from profiles.services import ProfileService
from saved_job.application.container import build_saved_job_repo
from saved_job.dtos import SavedJobFilter
from saved_job.models import JobSeekerSave
from user.models import User

logger = logging.getLogger(__name__)

REMOTE_FRIENDLY = ["Remote-Only", "Partial-Remote"]


class JobSeekerSaveService:
    """
    관심 공고 서비스
    """

    @staticmethod
    def save_job(user: User, job_id: int) -> JobSeekerSave:
        """
        관심 공고 저장

        Raises:
            NotFound: 존재하지 않는 공고
            Conflict: 이미 저장한 공고
        """
        profile = ProfileService.require_job_seeker_profile(user)
        job = JobPostActivityService.get_one(job_id)
        repo = build_saved_job_repo()

        if repo.exists(job_seeker_id=profile.pk, job_id=job.id):
            raise Conflict("Job already saved")

        try:
            with transaction.atomic():
                saved = repo.create(job_seeker=profile, job=job)
        except IntegrityError:
            raise Conflict("Job already saved")

        logger.info(f"User {user.id} saved job {job_id}")
        return saved

    @staticmethod
    def unsave_job(user: User, job_id: int) -> None:
        """
        관심 공고 해제

        Raises:
            NotFound: 저장하지 않은 공고
        """
        profile = ProfileService.require_job_seeker_profile(user)
        deleted = build_saved_job_repo().delete_for(
            job_seeker_id=profile.pk, job_id=job_id
        )
        if not deleted:
            raise NotFound("Saved job not found")
        logger.info(f"User {user.id} removed saved job {job_id}")

    @staticmethod
    def is_saved(user: User, job_id: int) -> bool:
        if not user.is_authenticated or not user.is_job_seeker:
            return False
        return build_saved_job_repo().exists(job_seeker_id=user.id, job_id=job_id)

    @staticmethod
    def get_candidates_job(user: User) -> QuerySet[JobSeekerSave]:
        profile = ProfileService.require_job_seeker_profile(user)
        return build_saved_job_repo().list_by_job_seeker(profile.pk)

    @staticmethod
    def list_saved_jobs(user: User, filters: SavedJobFilter) -> QuerySet[JobSeekerSave]:
        """
        저장한 공고 목록 (필터/정렬)

        - search: 제목, 회사명, 지역(city/state/country) 부분 일치
        - job_type: 정확히 일치
        - remote: 'true' 면 Remote-Only/Partial-Remote, 그 외 Office-Only
        """
        queryset = JobSeekerSaveService.get_candidates_job(user)

        if filters.search:
            term = filters.search
            queryset = queryset.filter(
                Q(job__job_title__icontains=term)
                | Q(job__job_company__name__icontains=term)
                | Q(job__job_location__city__icontains=term)
                | Q(job__job_location__state__icontains=term)
                | Q(job__job_location__country__icontains=term)
            )

        if filters.job_type:
            queryset = queryset.filter(job__job_type=filters.job_type)

        if filters.remote:
            if filters.remote.lower() == "true":
                queryset = queryset.filter(job__remote__in=REMOTE_FRIENDLY)
            else:
                queryset = queryset.filter(job__remote="Office-Only")

        return queryset.order_by(filters.ordering, "-id")

    @staticmethod
    def count(user: User) -> int:
        profile = ProfileService.require_job_seeker_profile(user)
        return build_saved_job_repo().count_by_job_seeker(profile.pk)
