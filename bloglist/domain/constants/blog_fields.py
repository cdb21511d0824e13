"""Constants for Blog model field names"""


class BlogFields:
    """Field name constants for Blog model"""
    ID = "id"
    TITLE = "title"
    AUTHOR = "author"
    URL = "url"
    LIKES = "likes"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
