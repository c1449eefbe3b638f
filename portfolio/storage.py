from .models import Profile, Education, Experience, Project, Skill
from .serializers import (
    ProfileSerializer,
    EducationSerializer,
    ExperienceSerializer,
    ProjectSerializer,
    SkillSerializer,
    ContactMessageSerializer,
)


class DatabaseStorage:
    """
    Create/list/get access to the portfolio tables.

    Records go in and come out in API shape (camelCase keys); every write
    is validated by the matching serializer and raises on bad data.
    """

    def _create(self, serializer_class, data):
        serializer = serializer_class(data=dict(data))
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return serializer.data

    def get_profile(self):
        profile = Profile.objects.first()
        if profile is None:
            return None
        return ProfileSerializer(profile).data

    def create_profile(self, data):
        return self._create(ProfileSerializer, data)

    def get_education(self):
        return EducationSerializer(Education.objects.all(), many=True).data

    def create_education(self, data):
        return self._create(EducationSerializer, data)

    def get_experiences(self):
        return ExperienceSerializer(Experience.objects.all(), many=True).data

    def create_experience(self, data):
        return self._create(ExperienceSerializer, data)

    def get_projects(self):
        return ProjectSerializer(Project.objects.all(), many=True).data

    def create_project(self, data):
        return self._create(ProjectSerializer, data)

    def get_skills(self):
        return SkillSerializer(Skill.objects.all(), many=True).data

    def create_skill(self, data):
        return self._create(SkillSerializer, data)

    def create_contact_message(self, data):
        return self._create(ContactMessageSerializer, data)


storage = DatabaseStorage()
