from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Profile(models.Model):
    name = models.CharField(max_length=200)
    title = models.CharField(max_length=200)
    bio = models.TextField()
    email = models.EmailField()
    linkedin_url = models.URLField(max_length=300, blank=True)
    github_url = models.URLField(max_length=300, blank=True)
    resume_url = models.URLField(max_length=500, blank=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name


class Education(models.Model):
    school = models.CharField(max_length=200)
    degree = models.CharField(max_length=200)
    field = models.CharField(max_length=200)
    # Free-text dates ("2019", "Jan 2022"); an empty end date means "Present".
    start_date = models.CharField(max_length=50)
    end_date = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        ordering = ['id']
        verbose_name_plural = 'education'

    def __str__(self):
        return f"{self.degree} at {self.school}"


class Experience(models.Model):
    company = models.CharField(max_length=200)
    role = models.CharField(max_length=200)
    start_date = models.CharField(max_length=50)
    end_date = models.CharField(max_length=50, null=True, blank=True)
    description = models.TextField()  # one bullet point per line

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.role} at {self.company}"


class Project(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField()
    link = models.URLField(max_length=500)
    github_link = models.URLField(max_length=500, null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title


class SkillCategory(models.TextChoices):
    CORE = 'core', 'Core'
    ALSO = 'also', 'Also'
    PRACTICES = 'practices', 'Practices'


class Skill(models.Model):
    name = models.CharField(max_length=100)
    category = models.CharField(
        max_length=20,
        choices=SkillCategory.choices,
        default=SkillCategory.ALSO,
    )
    proficiency = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )  # Proficiency level (0-100)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name


class ContactMessage(models.Model):
    name = models.TextField()
    email = models.EmailField()
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Message from {self.name}"
