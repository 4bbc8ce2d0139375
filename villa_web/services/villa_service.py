from typing import Optional

from ..models import APIResponse, VillaCreateDTO, VillaUpdateDTO
from .base_service import APIRequest, APIType, BaseService


class VillaService(BaseService):
    villa_url = "/api/v1/villas"

    def get_all(self, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=self.villa_url, token=token))

    def get(self, villa_id: int, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=f"{self.villa_url}/{villa_id}", token=token))

    def create(self, dto: VillaCreateDTO, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=self.villa_url, api_type=APIType.POST, data=dto, token=token))

    def update(self, dto: VillaUpdateDTO, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=f"{self.villa_url}/{dto.id}", api_type=APIType.PUT, data=dto, token=token))

    def delete(self, villa_id: int, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=f"{self.villa_url}/{villa_id}", api_type=APIType.DELETE, token=token))
