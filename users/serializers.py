# users/serializers.py

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils.timezone import now
from management.exceptions import DuplicateEmail, InvalidCredentials
from rest_framework import serializers
from .models import *
from .utils import *


# Serializer for the public part of a user (embedded in projects and tasks)
class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields


# Serializer for user registration
class UserRegistrationSerializer(serializers.ModelSerializer):
    name = serializers.CharField(
        max_length=150,
        error_messages={'blank': 'Name is required.', 'required': 'Name is required.'}
    )
    email = serializers.EmailField(
        max_length=150,
        error_messages={'invalid': 'Invalid email.', 'required': 'Invalid email.'}
    )
    password = serializers.CharField(
        write_only=True,
        min_length=settings.TASKBOARD_PASSWORD_MIN_LENGTH,
        trim_whitespace=False,
        error_messages={
            'min_length': f'Password must be at least {settings.TASKBOARD_PASSWORD_MIN_LENGTH} characters long.',
            'required': 'Password is required.',
        }
    )

    class Meta:
        model = User
        fields = ('name', 'email', 'password')

    def validate_email(self, value):
        return value.strip().lower()

    def create(self, validated_data):
        if User.objects.filter(email=validated_data['email']).exists():
            raise DuplicateEmail()

        password = validated_data.pop('password')

        user = User(**validated_data)
        user.set_password(password)

        try:
            with transaction.atomic():
                user.save()
        except IntegrityError:
            raise DuplicateEmail()

        log_user_action(
            user=user,
            action_name=ACCOUNTS,
            description="User created an account"
        )

        return user

    def to_representation(self, instance):
        return {
            'token': issue_token(instance),
            'user': UserSummarySerializer(instance).data,
        }


# Serializer for signing a user in
class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={'invalid': 'Invalid email.', 'required': 'Invalid email.'})
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={'required': 'Password is required.', 'blank': 'Password is required.'}
    )

    def validate(self, data):
        email = data.get('email').strip().lower()
        password = data.get('password')

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise InvalidCredentials()

        if not user.check_password(password):
            raise InvalidCredentials()

        if not user.is_active:
            log_user_action(
                user=user,
                action_name=ACCOUNTS,
                description="User tried to sign in to a deactivated account",
                status=STATUS_ACCESS_DENIED
            )
            raise InvalidCredentials()

        data['user'] = user

        return data

    def create(self, validated_data):
        user = validated_data['user']

        user.last_login = now()
        user.save(update_fields=['last_login'])

        log_user_action(
            user=user,
            action_name=ACCOUNTS,
            description="User signed in"
        )

        return {
            'token': issue_token(user),
            'user': UserSummarySerializer(user).data,
        }
