from rest_framework import serializers
from .models import Profile, Education, Experience, Project, Skill, ContactMessage


class ProfileSerializer(serializers.ModelSerializer):
    linkedinUrl = serializers.URLField(source='linkedin_url', required=False, allow_blank=True)
    githubUrl = serializers.URLField(source='github_url', required=False, allow_blank=True)
    resumeUrl = serializers.URLField(source='resume_url', required=False, allow_blank=True)
    imageUrl = serializers.URLField(source='image_url', required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Profile
        fields = ['id', 'name', 'title', 'bio', 'email', 'linkedinUrl', 'githubUrl', 'resumeUrl', 'imageUrl']


class EducationSerializer(serializers.ModelSerializer):
    startDate = serializers.CharField(source='start_date', max_length=50)
    endDate = serializers.CharField(source='end_date', max_length=50, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Education
        fields = ['id', 'school', 'degree', 'field', 'startDate', 'endDate']


class ExperienceSerializer(serializers.ModelSerializer):
    startDate = serializers.CharField(source='start_date', max_length=50)
    endDate = serializers.CharField(source='end_date', max_length=50, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Experience
        fields = ['id', 'company', 'role', 'startDate', 'endDate', 'description']


class ProjectSerializer(serializers.ModelSerializer):
    githubLink = serializers.URLField(source='github_link', required=False, allow_blank=True, allow_null=True)
    tags = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Project
        fields = ['id', 'title', 'description', 'link', 'githubLink', 'tags']


class SkillSerializer(serializers.ModelSerializer):
    class Meta:
        model = Skill
        fields = ['id', 'name', 'category', 'proficiency']


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ['name', 'email', 'message']
