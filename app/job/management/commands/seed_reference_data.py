"""
Management command to seed reference data.

사용자 유형(Recruiter / Job Seeker)과 기본 회사/근무지 데이터를 생성합니다.
이미 있는 행은 건너뛰므로 여러 번 실행해도 됩니다.
"""

from django.core.management.base import BaseCommand
from job.services import JobDataService
from user.models import UsersType

DEFAULT_LOCATIONS = [
    ("Seoul", "Seoul", "South Korea"),
    ("Busan", "", "South Korea"),
    ("New York", "NY", "United States"),
    ("San Francisco", "CA", "United States"),
    ("London", "", "United Kingdom"),
    ("Berlin", "Berlin", "Germany"),
]

DEFAULT_COMPANIES = [
    ("Acme Corp", "https://acme.example.com"),
    ("Globex", "https://globex.example.com"),
    ("Initech", "https://initech.example.com"),
]


class Command(BaseCommand):
    help = "Seeds user types and default companies/locations for the job portal."

    def add_arguments(self, parser):
        parser.add_argument(
            "--user-types-only",
            action="store_true",
            help="Only create the Recruiter / Job Seeker user types.",
        )

    def handle(self, *args, **options):
        self.seed_user_types()

        if options["user_types_only"]:
            return

        self.seed_locations()
        self.seed_companies()
        self.stdout.write(self.style.SUCCESS("Reference data is ready."))

    def seed_user_types(self):
        for pk, name in ((1, UsersType.RECRUITER), (2, UsersType.JOB_SEEKER)):
            _, created = UsersType.objects.get_or_create(
                pk=pk, defaults={"user_type_name": name}
            )
            if created:
                self.stdout.write(f"Created user type {pk}: {name}")
        self.stdout.write(self.style.SUCCESS("User types seeded."))

    def seed_locations(self):
        created_count = 0
        for city, state, country in DEFAULT_LOCATIONS:
            _, created = JobDataService.get_or_create_location(
                city=city, state=state, country=country
            )
            created_count += int(created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Locations: {created_count} created, "
                f"{len(DEFAULT_LOCATIONS) - created_count} already existed."
            )
        )

    def seed_companies(self):
        created_count = 0
        for name, website in DEFAULT_COMPANIES:
            _, created = JobDataService.get_or_create_company(name=name, website=website)
            created_count += int(created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Companies: {created_count} created, "
                f"{len(DEFAULT_COMPANIES) - created_count} already existed."
            )
        )
