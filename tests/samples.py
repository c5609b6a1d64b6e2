"""Reference values shared by the color and conversion tests."""

# (rgb, hsv, hsl, hsi); hue in degrees, HSI hue is the geometric hue
RGB_HS_SAMPLES = [
    ((1.000, 1.000, 1.000), (0.0, 0.000, 1.000), (0.0, 0.000, 1.000), (0.0, 0.000, 1.000)),
    ((0.500, 0.500, 0.500), (0.0, 0.000, 0.500), (0.0, 0.000, 0.500), (0.0, 0.000, 0.500)),
    ((0.000, 0.000, 0.000), (0.0, 0.000, 0.000), (0.0, 0.000, 0.000), (0.0, 0.000, 0.000)),
    ((1.000, 0.000, 0.000), (0.0, 1.000, 1.000), (0.0, 1.000, 0.500), (0.0, 1.000, 0.333)),
    ((0.750, 0.750, 0.000), (60.0, 1.000, 0.750), (60.0, 1.000, 0.375), (60.0, 1.000, 0.500)),
    ((0.000, 0.500, 0.000), (120.0, 1.000, 0.500), (120.0, 1.000, 0.250), (120.0, 1.000, 0.167)),
    ((0.500, 1.000, 1.000), (180.0, 0.500, 1.000), (180.0, 1.000, 0.750), (180.0, 0.400, 0.833)),
    ((0.500, 0.500, 1.000), (240.0, 0.500, 1.000), (240.0, 1.000, 0.750), (240.0, 0.250, 0.667)),
    ((0.750, 0.250, 0.750), (300.0, 0.667, 0.750), (300.0, 0.500, 0.500), (300.0, 0.571, 0.583)),
    ((0.628, 0.643, 0.142), (61.8, 0.779, 0.643), (61.8, 0.638, 0.393), (61.5, 0.699, 0.471)),
    ((0.255, 0.104, 0.918), (251.1, 0.887, 0.918), (251.1, 0.832, 0.511), (250.0, 0.756, 0.426)),
    ((0.116, 0.675, 0.255), (134.9, 0.828, 0.675), (134.9, 0.707, 0.396), (133.8, 0.667, 0.349)),
    ((0.941, 0.785, 0.053), (49.5, 0.944, 0.941), (49.5, 0.893, 0.497), (50.5, 0.911, 0.593)),
    ((0.704, 0.187, 0.897), (283.7, 0.792, 0.897), (283.7, 0.775, 0.542), (284.8, 0.686, 0.596)),
    ((0.931, 0.463, 0.316), (14.3, 0.661, 0.931), (14.3, 0.817, 0.624), (13.2, 0.446, 0.570)),
    ((0.998, 0.974, 0.532), (56.9, 0.467, 0.998), (56.9, 0.991, 0.765), (57.4, 0.363, 0.835)),
    ((0.099, 0.795, 0.591), (162.4, 0.875, 0.795), (162.4, 0.779, 0.447), (163.4, 0.800, 0.495)),
    ((0.211, 0.149, 0.597), (248.3, 0.750, 0.597), (248.3, 0.601, 0.373), (247.3, 0.533, 0.319)),
    ((0.495, 0.493, 0.721), (240.5, 0.316, 0.721), (240.5, 0.290, 0.607), (240.4, 0.135, 0.570)),
]

samples_rgb_hsv = {rgb: hsv for rgb, hsv, _, _ in RGB_HS_SAMPLES}
samples_rgb_hsl = {rgb: hsl for rgb, _, hsl, _ in RGB_HS_SAMPLES}
samples_rgb_hsi = {rgb: hsi for rgb, _, _, hsi in RGB_HS_SAMPLES}
samples_hsv_hsl = {hsv: hsl for _, hsv, hsl, _ in RGB_HS_SAMPLES}
