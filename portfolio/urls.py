from django.urls import path
from .views import (
    ProfileDetail,
    ExperienceList,
    EducationList,
    ProjectList,
    SkillList,
    ContactSubmit,
    PortfolioContentView,
)

urlpatterns = [
    path('profile/', ProfileDetail.as_view(), name='profile-get'),
    path('experiences/', ExperienceList.as_view(), name='experiences-list'),
    path('education/', EducationList.as_view(), name='education-list'),
    path('projects/', ProjectList.as_view(), name='projects-list'),
    path('skills/', SkillList.as_view(), name='skills-list'),
    path('contact/', ContactSubmit.as_view(), name='contact-submit'),

    path('portfolio/', PortfolioContentView.as_view(), name='portfolio-get'),
]
