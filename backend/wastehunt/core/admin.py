# wastehunt/core/admin.py
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from fastapi import Request
from wastehunt.core.security import verify_password, create_access_token, decode_token
from wastehunt.core.config import settings
from wastehunt.repositories.user_repository import UserRepository
from wastehunt.core.database import db_helper
from wastehunt.models.user import User, UserRole
from wastehunt.models.waste import Report, Tip
from wastehunt.models.engagement import Achievement, Badge, Comment


# 1. Авторизация в админке: только пользователи с ролью admin
class AdminAuth(AuthenticationBackend):
    async def login(self, request: Request) -> bool:
        form = await request.form()
        username, password = form["username"], form["password"]

        async with db_helper.session_factory() as session:
            user = await UserRepository(session).get_by_username(username)

        if user and user.role == UserRole.ADMIN.value and verify_password(password, user.password_hash):
            request.session.update({"token": create_access_token({"sub": str(user.id), "role": user.role})})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        token = request.session.get("token")
        if not token:
            return False
        try:
            payload = decode_token(token)
        except ValueError:
            return False
        return payload.get("role") == UserRole.ADMIN.value


authentication_backend = AdminAuth(secret_key=settings.security.JWT_SECRET_KEY.get_secret_value())


# 2. Представления моделей
class UserAdmin(ModelView, model=User):
    column_list = [User.id, User.username, User.role, User.points, User.weekly_points, User.rank, User.total_tips]
    column_searchable_list = [User.username]
    column_sortable_list = [User.id, User.points, User.weekly_points]
    form_excluded_columns = [User.password_hash, User.tips, User.achievements, User.badges]
    icon = "fa-solid fa-user"


class TipAdmin(ModelView, model=Tip):
    # Модерация: verified и impact_score правятся отсюда
    column_list = [Tip.id, Tip.user_id, Tip.title, Tip.amount, Tip.verified, Tip.impact_score, Tip.created_at]
    column_searchable_list = [Tip.title, Tip.location]
    column_sortable_list = [Tip.id, Tip.amount, Tip.created_at]
    form_columns = [Tip.verified, Tip.impact_score]
    icon = "fa-solid fa-magnifying-glass-dollar"


class ReportAdmin(ModelView, model=Report):
    column_list = [Report.id, Report.title, Report.amount, Report.year, Report.shares, Report.source]
    column_searchable_list = [Report.title]
    column_sortable_list = [Report.id, Report.amount, Report.shares]
    icon = "fa-solid fa-trash-can"


class CommentAdmin(ModelView, model=Comment):
    column_list = [Comment.id, Comment.user_id, Comment.content, Comment.created_at]
    can_edit = False
    icon = "fa-solid fa-comments"


class AchievementAdmin(ModelView, model=Achievement):
    column_list = [Achievement.id, Achievement.user_id, Achievement.type, Achievement.earned_at]
    can_create = False
    can_edit = False
    icon = "fa-solid fa-trophy"


class BadgeAdmin(ModelView, model=Badge):
    column_list = [Badge.id, Badge.user_id, Badge.name, Badge.icon, Badge.earned_at]
    can_create = False
    can_edit = False
    icon = "fa-solid fa-medal"


# 3. Инициализация
def setup_admin(app, engine):
    admin = Admin(app, engine, authentication_backend=authentication_backend, title="WasteHunt Admin")

    admin.add_view(UserAdmin)
    admin.add_view(TipAdmin)
    admin.add_view(ReportAdmin)
    admin.add_view(CommentAdmin)
    admin.add_view(AchievementAdmin)
    admin.add_view(BadgeAdmin)
    return admin
