"""
Job Posting Service

채용 공고 / 회사 / 근무지 관리 서비스
"""

import logging
from typing import Dict, List, Optional

from common.exceptions import Forbidden, NotFound, ValidationFailed
from django.db import transaction
from django.db.models import QuerySet
from job.application.container import (
    build_job_company_repo,
    build_job_location_repo,
    build_job_post_repo,
)
from job.dtos import JobFormMetadataDTO, JobSearchCriteria
from job.models import JobCompany, JobLocation, JobPostActivity
from user.models import User

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ["job_title", "description_of_job", "job_type", "salary", "remote"]


class JobPostActivityService:
    """
    채용 공고 서비스

    채용 공고의 CRUD 및 검색, 소유자(Recruiter) 확인을 담당합니다.
    """

    @staticmethod
    def get_all() -> QuerySet[JobPostActivity]:
        return build_job_post_repo().list_all()

    @staticmethod
    def get_one(job_id: int) -> JobPostActivity:
        """
        채용 공고 조회

        Raises:
            NotFound: 존재하지 않는 공고
        """
        job = build_job_post_repo().get_by_id(job_id)
        if job is None:
            logger.warning(f"JobPostActivity {job_id} not found")
            raise NotFound("Job not found")
        return job

    @staticmethod
    def search(criteria: JobSearchCriteria) -> QuerySet[JobPostActivity]:
        """
        채용 공고 검색

        조건이 하나도 없으면 전체 목록(최신순)을 반환합니다.
        """
        repo = build_job_post_repo()
        if not criteria.has_filters:
            return repo.list_all()
        return repo.search(criteria)

    @staticmethod
    def get_recruiter_jobs(user: User) -> QuerySet[JobPostActivity]:
        """Recruiter 본인이 등록한 공고 (total_candidates 포함)"""
        return build_job_post_repo().list_by_poster(user.id)

    @staticmethod
    def get_owned_job(user: User, job_id: int) -> JobPostActivity:
        """
        본인이 등록한 공고 조회

        Raises:
            NotFound: 존재하지 않는 공고
            Forbidden: 다른 Recruiter 의 공고
        """
        job = JobPostActivityService.get_one(job_id)
        if job.posted_by_id != user.id:
            logger.warning(f"User {user.id} tried to access job {job_id} it does not own")
            raise Forbidden("You can only manage your own job postings")
        return job

    @staticmethod
    def _resolve_relations(data: Dict) -> Dict:
        """job_location_id / job_company_id 를 엔티티로 변환 (없는 ID 는 무시)"""
        relations: Dict = {}
        if "job_location_id" in data:
            location_id = data.get("job_location_id")
            location = None
            if location_id is not None:
                location = build_job_location_repo().get_by_id(location_id)
                if location is None:
                    logger.warning(f"JobLocation {location_id} not found, ignoring")
            relations["job_location"] = location
        if "job_company_id" in data:
            company_id = data.get("job_company_id")
            company = None
            if company_id is not None:
                company = build_job_company_repo().get_by_id(company_id)
                if company is None:
                    logger.warning(f"JobCompany {company_id} not found, ignoring")
            relations["job_company"] = company
        return relations

    @staticmethod
    def create(user: User, data: Dict) -> JobPostActivity:
        """
        채용 공고 생성

        Args:
            user: 등록하는 Recruiter
            data: 검증된 공고 데이터 (job_location_id, job_company_id 선택)

        Returns:
            생성된 JobPostActivity 객체
        """
        fields = {key: data[key] for key in EDITABLE_FIELDS}
        fields.update(JobPostActivityService._resolve_relations(data))
        with transaction.atomic():
            job = build_job_post_repo().create(posted_by=user, **fields)
            logger.info(f"Created JobPostActivity {job.id} by user {user.id}")
            return job

    @staticmethod
    def update(user: User, job_id: int, data: Dict) -> JobPostActivity:
        """
        채용 공고 수정 (본인 공고만)

        Args:
            user: 요청한 Recruiter
            job_id: 공고 ID
            data: 검증된 공고 데이터

        Returns:
            수정된 JobPostActivity 객체
        """
        job = JobPostActivityService.get_owned_job(user, job_id)
        with transaction.atomic():
            for key in EDITABLE_FIELDS:
                if key in data:
                    setattr(job, key, data[key])
            for key, value in JobPostActivityService._resolve_relations(data).items():
                setattr(job, key, value)
            job = build_job_post_repo().save(job)
            logger.info(f"Updated JobPostActivity {job_id}")
            return job

    @staticmethod
    def delete(user: User, job_id: int) -> None:
        """채용 공고 삭제 (본인 공고만, 지원/저장 내역도 함께 삭제)"""
        job = JobPostActivityService.get_owned_job(user, job_id)
        with transaction.atomic():
            build_job_post_repo().delete(job)
            logger.info(f"Deleted JobPostActivity {job_id}")

    @staticmethod
    def get_form_metadata() -> JobFormMetadataDTO:
        return JobFormMetadataDTO(
            companies=[
                {"id": company.id, "name": company.name}
                for company in build_job_company_repo().list_all()
            ],
            locations=[
                {
                    "id": location.id,
                    "city": location.city,
                    "state": location.state,
                    "country": location.country,
                }
                for location in build_job_location_repo().list_all()
            ],
            job_types=list(JobPostActivity.JOB_TYPES),
            remote_options=list(JobPostActivity.REMOTE_OPTIONS),
        )


class JobDataService:
    """
    회사 / 근무지 서비스

    동일한 값이 이미 있으면 새로 만들지 않고 기존 행을 반환합니다.
    """

    @staticmethod
    def list_locations() -> List[JobLocation]:
        return build_job_location_repo().list_all()

    @staticmethod
    def get_or_create_location(
        *, city: str, state: Optional[str], country: str
    ) -> tuple[JobLocation, bool]:
        city = (city or "").strip()
        country = (country or "").strip()
        if not city or not country:
            raise ValidationFailed("City and country are required")

        location, created = build_job_location_repo().get_or_create(
            city=city, state=(state or "").strip(), country=country
        )
        if created:
            logger.info(f"Created JobLocation {location.id} ({location})")
        return location, created

    @staticmethod
    def search_locations(
        *,
        city: Optional[str] = None,
        state: Optional[str] = None,
        country: Optional[str] = None,
    ) -> List[JobLocation]:
        return build_job_location_repo().search(city=city, state=state, country=country)

    @staticmethod
    def list_companies() -> List[JobCompany]:
        return build_job_company_repo().list_all()

    @staticmethod
    def get_or_create_company(
        *, name: str, logo: str = "", website: str = ""
    ) -> tuple[JobCompany, bool]:
        name = (name or "").strip()
        if not name:
            raise ValidationFailed("Company name is required")

        company, created = build_job_company_repo().get_or_create(
            name=name, logo=logo or "", website=website or ""
        )
        if created:
            logger.info(f"Created JobCompany {company.id} ({company.name})")
        return company, created

    @staticmethod
    def search_companies(name: str) -> List[JobCompany]:
        return build_job_company_repo().search(name=(name or "").strip())
