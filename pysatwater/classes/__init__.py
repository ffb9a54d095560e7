from .classes import phase, tws_method, class_dic
