from pydantic import BaseModel, HttpUrl, constr

# Shared properties
class CategoryBase(BaseModel):
    category_name: constr(strip_whitespace=True, min_length=1, max_length=255)
    category_image_link: HttpUrl

# Properties to receive on category creation
class CategoryCreate(CategoryBase):
    pass

# PUT replaces both fields, like creation
class CategoryUpdate(CategoryBase):
    pass

# Properties to return to client
class Category(BaseModel):
    category_id: int
    category_name: str
    category_image_link: str

    class Config:
        from_attributes = True
