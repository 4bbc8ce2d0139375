from typing import Optional

from ..models import APIResponse, VillaNumberCreateDTO, VillaNumberUpdateDTO
from .base_service import APIRequest, APIType, BaseService


class VillaNumberService(BaseService):
    villa_number_url = "/api/v1/villa-numbers"

    def get_all(self, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=self.villa_number_url, token=token))

    def get(self, villa_no: int, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=f"{self.villa_number_url}/{villa_no}", token=token))

    def create(self, dto: VillaNumberCreateDTO, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(url=self.villa_number_url, api_type=APIType.POST, data=dto, token=token))

    def update(self, dto: VillaNumberUpdateDTO, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(
            url=f"{self.villa_number_url}/{dto.villa_no}", api_type=APIType.PUT, data=dto, token=token
        ))

    def delete(self, villa_no: int, token: Optional[str] = None) -> APIResponse:
        return self.send(APIRequest(
            url=f"{self.villa_number_url}/{villa_no}", api_type=APIType.DELETE, token=token
        ))
