from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from user.models import User, UsersType


class UserRegistrationSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="최소 8자 이상의 비밀번호를 입력하세요.",
    )
    user_type_id = serializers.IntegerField(help_text="1 = Recruiter, 2 = Job Seeker")

    def validate_password(self, value):
        """
        AUTH_PASSWORD_VALIDATORS 로 비밀번호 검증

        사용자 속성 유사도 검사를 위해 입력된 이메일/이름을 함께 넘깁니다.
        """
        candidate = User(
            email=self.initial_data.get("email", ""),
            first_name=self.initial_data.get("first_name", ""),
            last_name=self.initial_data.get("last_name", ""),
        )
        try:
            password_validation.validate_password(value, user=candidate)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return value


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class UsersTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = UsersType
        fields = ["id", "user_type_name"]


class UserSummarySerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source="id", read_only=True)
    user_type = serializers.CharField(source="role", read_only=True)
    registration_date = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = [
            "user_id",
            "email",
            "first_name",
            "last_name",
            "user_type",
            "registration_date",
            "is_active",
        ]
