from pydantic import BaseModel

from enums.toast_variant import ToastVariant


class ToastDTO(BaseModel):
    title: str
    description: str | None = None
    variant: ToastVariant = ToastVariant.DEFAULT
