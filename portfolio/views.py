from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .content import ContentTables, resolve_content
from .models import Education, Experience, Project, Skill
from .serializers import (
    ContactMessageSerializer,
    EducationSerializer,
    ExperienceSerializer,
    ProjectSerializer,
    SkillSerializer,
)
from .storage import storage


class ProfileDetail(APIView):
    # Only one profile; an empty object when nothing is stored yet.
    def get(self, request):
        return Response(storage.get_profile() or {})


class ExperienceList(generics.ListAPIView):
    queryset = Experience.objects.all()
    serializer_class = ExperienceSerializer


class EducationList(generics.ListAPIView):
    queryset = Education.objects.all()
    serializer_class = EducationSerializer


class ProjectList(generics.ListAPIView):
    queryset = Project.objects.all()
    serializer_class = ProjectSerializer


class SkillList(generics.ListAPIView):
    queryset = Skill.objects.all()
    serializer_class = SkillSerializer


class ContactSubmit(generics.CreateAPIView):
    serializer_class = ContactMessageSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        storage.create_contact_message(serializer.validated_data)
        return Response({"success": True}, status=status.HTTP_200_OK)


class PortfolioContentView(APIView):
    """The stored records resolved into what the portfolio page renders."""

    tables = ContentTables.from_defaults()

    def get(self, request):
        content = resolve_content(
            profile=storage.get_profile(),
            projects=storage.get_projects(),
            experiences=storage.get_experiences(),
            skills=storage.get_skills(),
            education=storage.get_education(),
            tables=self.tables,
        )
        return Response(content.to_dict())
