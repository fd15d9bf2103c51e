class Face:
    def __init__(self, face_id=None, data=None):
        self.id = face_id
        self.data = data              # 对应的 site
        self.outer_component = None   # 指向该面上任一半边
        self.boundary = []            # 该面上的所有半边（按创建顺序）

    def __repr__(self):
        return f"Face(id={self.id}, edges={len(self.boundary)})"
