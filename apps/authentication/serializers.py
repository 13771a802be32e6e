from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'name', 'username', 'email', 'role', 'commission_rate', 'status', 'date_joined')
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'name', 'username')
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    # Declared by hand so a taken username reaches the service as a conflict
    name = serializers.CharField(min_length=2, max_length=100)
    username = serializers.CharField(min_length=3, max_length=150)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(min_length=6, write_only=True)
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES)
    commission_rate = serializers.DecimalField(max_digits=5, decimal_places=2, required=False)


class UserUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(min_length=6, write_only=True, required=False)
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES, required=False)
    commission_rate = serializers.DecimalField(max_digits=5, decimal_places=2, required=False)
    status = serializers.ChoiceField(choices=User.STATUS_CHOICES, required=False)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()

    def validate(self, data):
        try:
            user = User.objects.get(username=data['username'])
        except User.DoesNotExist:
            raise serializers.ValidationError('Invalid credentials')

        if not user.check_password(data['password']):
            raise serializers.ValidationError('Invalid credentials')
        if user.status != User.STATUS_ACTIVE:
            raise serializers.ValidationError('Account is inactive')

        data['user'] = user
        return data
