from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(trim_whitespace=False)
    password = serializers.CharField(trim_whitespace=False)


class LoginSuccessSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    role = serializers.CharField()
    name = serializers.CharField()


class LoginFailureSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(required=False)
    error = serializers.CharField(required=False)
