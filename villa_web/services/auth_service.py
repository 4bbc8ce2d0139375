from ..models import APIResponse, LoginRequestDTO, RegistrationRequestDTO
from .base_service import APIRequest, APIType, BaseService


class AuthService(BaseService):
    users_url = "/api/v1/users"

    def login(self, dto: LoginRequestDTO) -> APIResponse:
        return self.send(APIRequest(url=f"{self.users_url}/login", api_type=APIType.POST, data=dto))

    def register(self, dto: RegistrationRequestDTO) -> APIResponse:
        return self.send(APIRequest(url=f"{self.users_url}/register", api_type=APIType.POST, data=dto))
