from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager que usa o e-mail como identificador de login"""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("O e-mail é obrigatório.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if not extra_fields.get("is_staff") or not extra_fields.get("is_superuser"):
            raise ValueError("Superusuário precisa de is_staff=True e is_superuser=True.")
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Usuário do back-office. Login por e-mail; cada usuário pertence a no máximo uma loja.
    """

    username = models.CharField(
        max_length=150,
        unique=True,
        null=True,
        blank=True,
        help_text="Nome de usuário (opcional)",
    )

    nome = models.CharField(max_length=255, help_text="Nome completo")

    email = models.EmailField(
        max_length=255,
        unique=True,
        error_messages={"unique": "Este e-mail já está em uso."},
        help_text="E-mail usado no login",
    )

    loja = models.ForeignKey(
        "lojas.Loja",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="usuarios",
        help_text="Loja à qual o usuário pertence",
    )

    versao_token = models.PositiveIntegerField(
        default=0,
        help_text="Incrementada no logout; tokens emitidos com versão anterior deixam de valer",
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["nome"]

    class Meta:
        verbose_name = "Usuário"
        verbose_name_plural = "Usuários"

    def __str__(self):
        return f"{self.nome} <{self.email}>"

    def revogar_tokens(self):
        """Invalida todos os tokens já emitidos para o usuário"""
        self.versao_token = models.F("versao_token") + 1
        self.save(update_fields=["versao_token"])
        self.refresh_from_db(fields=["versao_token"])
