# purecheck/rules/reference_data.py
"""
Static toxicology reference data

Curated hazard entries keyed by canonical lookup key, the alias table used by
the name normalizer, and the extended monitor list of chemicals of interest
that have no curated detail yet.
"""

from typing import Any, Dict, List


# ============================================================================
# Curated entries
# ============================================================================

CURATED_INGREDIENTS: Dict[str, Dict[str, Any]] = {
    # --- Parabens ---
    "methylparaben": {"name": "Methylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Endocrine disruption, estrogen mimic.", "evidence": "SCCS", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor"]},
    "ethylparaben": {"name": "Ethylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Potential hormonal interference.", "evidence": "ECHA", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "propylparaben": {"name": "Propylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Hormonal interference, fertility concerns.", "evidence": "Endocrine Society", "pregnancySafe": "AVOID", "tags": ["EDC", "Reprotoxic"]},
    "butylparaben": {"name": "Butylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Reproductive toxicity and developmental issues.", "evidence": "OECD", "pregnancySafe": "AVOID", "tags": ["EDC", "Reprotoxic"]},
    "isobutylparaben": {"name": "Isobutylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Strongest estrogenic activity in paraben family.", "evidence": "EU Banned", "pregnancySafe": "AVOID", "tags": ["Banned", "Hormone Disruptor"]},
    "benzylparaben": {"name": "Benzylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Estrogenic potential and bioaccumulation.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "isopropylparaben": {"name": "Isopropylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Regulated due to hormone disruption risks.", "evidence": "Regulatory", "pregnancySafe": "AVOID", "tags": ["Banned", "Hormone Disruptor"]},
    "phenylparaben": {"name": "Phenylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Hormonal interference.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "heptylparaben": {"name": "Heptylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Mimics estrogen.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "pentylparaben": {"name": "Pentylparaben", "category": "Paraben", "riskLevel": "HIGH", "harm": "Hormonal disruption.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC"]},

    # --- Phthalates & plasticizers ---
    "diethyl phthalate": {"name": "Diethyl phthalate (DEP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Hormone disruption, infertility risk.", "evidence": "EWG", "pregnancySafe": "AVOID", "tags": ["Plasticizer", "Hormone Disruptor"]},
    "dibutyl phthalate": {"name": "Dibutyl phthalate (DBP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Severe reproductive toxicant.", "evidence": "Prop 65", "pregnancySafe": "AVOID", "tags": ["Banned", "Reprotoxic"]},
    "diethylhexyl phthalate": {"name": "Di(2-ethylhexyl) phthalate (DEHP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Potent endocrine disruptor.", "evidence": "WHO", "pregnancySafe": "AVOID", "tags": ["EDC", "Reprotoxic"]},
    "dimethyl phthalate": {"name": "Dimethyl phthalate (DMP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Hormonal interference.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "benzyl butyl phthalate": {"name": "Benzyl butyl phthalate (BBP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Reproductive toxicity.", "evidence": "EU Ban", "pregnancySafe": "AVOID", "tags": ["Banned", "Reprotoxic"]},
    "diisononyl phthalate": {"name": "Diisononyl phthalate (DINP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "EDC and potential carcinogen.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC", "Carcinogen"]},
    "diisodecyl phthalate": {"name": "Diisodecyl phthalate (DIDP)", "category": "Phthalate", "riskLevel": "HIGH", "harm": "Reproductive and liver toxicity.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["Toxic", "Reprotoxic"]},
    "2-ethylhexyl diphenyl phosphate": {"name": "2-Ethylhexyl diphenyl phosphate (EHDP)", "category": "Plasticizer", "riskLevel": "HIGH", "harm": "Flame retardant with endocrine concerns.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["Flame Retardant", "EDC"]},

    # --- Bisphenols ---
    "bisphenol a": {"name": "Bisphenol A (BPA)", "category": "Bisphenol", "riskLevel": "HIGH", "harm": "Potent EDC. Linked to heart disease and diabetes.", "evidence": "CDC", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor"]},
    "bisphenol s": {"name": "Bisphenol S (BPS)", "category": "Bisphenol", "riskLevel": "HIGH", "harm": "BPA alternative with identical endocrine risks.", "evidence": "Journal of Endocrinology", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor"]},
    "bisphenol f": {"name": "Bisphenol F (BPF)", "category": "Bisphenol", "riskLevel": "HIGH", "harm": "Estrogenic and androgenic activity.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["EDC", "Androgenic"]},
    "bisphenol af": {"name": "Bisphenol AF (BPAF)", "category": "Bisphenol", "riskLevel": "HIGH", "harm": "Fluorinated bisphenol with strong estrogenic activity.", "evidence": "NTP", "pregnancySafe": "AVOID", "tags": ["EDC"]},

    # --- PFAS ---
    "pfoa": {"name": "PFOA", "category": "PFAS", "riskLevel": "HIGH", "harm": "Forever chemical. Kidney and thyroid risk.", "evidence": "EPA", "pregnancySafe": "AVOID", "tags": ["Forever Chemical", "Endocrine Disruptor"]},
    "pfos": {"name": "PFOS", "category": "PFAS", "riskLevel": "HIGH", "harm": "Persistent toxic pollutant.", "evidence": "WHO", "pregnancySafe": "AVOID", "tags": ["Persistent"]},
    "genx": {"name": "GenX (HFPO-DA)", "category": "PFAS", "riskLevel": "HIGH", "harm": "Toxic PFOA replacement.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["Persistent"]},
    "polytetrafluoroethylene": {"name": "Polytetrafluoroethylene (PTFE)", "category": "PFAS", "riskLevel": "MODERATE", "harm": "Fluoropolymer; may carry PFAS processing residues.", "evidence": "EWG", "pregnancySafe": "CAUTION", "tags": ["Forever Chemical"]},
    "perfluorooctyl triethoxysilane": {"name": "Perfluorooctyl triethoxysilane", "category": "PFAS", "riskLevel": "HIGH", "harm": "Can degrade into persistent perfluorinated acids.", "evidence": "Research", "pregnancySafe": "AVOID", "tags": ["Forever Chemical"]},

    # --- Antimicrobials ---
    "triclosan": {"name": "Triclosan", "category": "Antimicrobial", "riskLevel": "HIGH", "harm": "Thyroid disruption and antibiotic resistance.", "evidence": "FDA", "pregnancySafe": "AVOID", "tags": ["Antibacterial", "Hormone Disruptor"]},
    "triclocarban": {"name": "Triclocarban", "category": "Antimicrobial", "riskLevel": "HIGH", "harm": "Sex hormone disruptor.", "evidence": "Toxicology", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor"]},
    "chloroxylenol": {"name": "Chloroxylenol (PCMX)", "category": "Antimicrobial", "riskLevel": "MODERATE", "harm": "Skin irritant and sensitizer.", "evidence": "CIR", "pregnancySafe": "CAUTION", "tags": ["Irritant"]},
    "benzalkonium chloride": {"name": "Benzalkonium Chloride", "category": "Antimicrobial", "riskLevel": "MODERATE", "harm": "Irritant; associated with contact dermatitis.", "evidence": "Dermatology", "pregnancySafe": "CAUTION", "tags": ["Irritant", "Allergen"]},
    "methylisothiazolinone": {"name": "Methylisothiazolinone", "category": "Antimicrobial", "riskLevel": "HIGH", "harm": "Potent contact allergen; banned in EU leave-on products.", "evidence": "SCCS", "pregnancySafe": "CAUTION", "tags": ["Allergen", "Sensitizer"]},
    "methylchloroisothiazolinone": {"name": "Methylchloroisothiazolinone", "category": "Antimicrobial", "riskLevel": "HIGH", "harm": "Strong skin sensitizer.", "evidence": "SCCS", "pregnancySafe": "CAUTION", "tags": ["Allergen", "Sensitizer"]},

    # --- Formaldehyde & releasers ---
    "formaldehyde": {"name": "Formaldehyde", "category": "Preservative", "riskLevel": "HIGH", "harm": "Known human carcinogen and sensitizer.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Carcinogen", "Sensitizer"]},
    "dmdm hydantoin": {"name": "DMDM Hydantoin", "category": "Formaldehyde Releaser", "riskLevel": "HIGH", "harm": "Releases carcinogenic formaldehyde.", "evidence": "Dermatology", "pregnancySafe": "AVOID", "tags": ["Allergen", "Carcinogen"]},
    "diazolidinyl urea": {"name": "Diazolidinyl Urea", "category": "Formaldehyde Releaser", "riskLevel": "HIGH", "harm": "Formaldehyde donor; common contact allergen.", "evidence": "CIR", "pregnancySafe": "AVOID", "tags": ["Allergen"]},
    "imidazolidinyl urea": {"name": "Imidazolidinyl Urea", "category": "Formaldehyde Releaser", "riskLevel": "HIGH", "harm": "Formaldehyde donor; skin sensitizer.", "evidence": "CIR", "pregnancySafe": "AVOID", "tags": ["Sensitizer"]},
    "quaternium-15": {"name": "Quaternium-15", "category": "Formaldehyde Releaser", "riskLevel": "HIGH", "harm": "Releases formaldehyde; frequent cause of allergic dermatitis.", "evidence": "ACDS", "pregnancySafe": "AVOID", "tags": ["Allergen", "Carcinogen"]},
    "bronopol": {"name": "Bronopol", "category": "Formaldehyde Releaser", "riskLevel": "HIGH", "harm": "Can form nitrosamines and release formaldehyde.", "evidence": "SCCS", "pregnancySafe": "AVOID", "tags": ["Irritant", "Carcinogen"]},
    "sodium hydroxymethylglycinate": {"name": "Sodium Hydroxymethylglycinate", "category": "Formaldehyde Releaser", "riskLevel": "MODERATE", "harm": "Low-level formaldehyde donor.", "evidence": "CIR", "pregnancySafe": "CAUTION", "tags": ["Sensitizer"]},

    # --- UV filters ---
    "oxybenzone": {"name": "Oxybenzone (Benzophenone-3)", "category": "UV Filter", "riskLevel": "HIGH", "harm": "Strong endocrine disruptor. Bleaches coral.", "evidence": "Peer-Reviewed", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor", "Allergen"]},
    "octinoxate": {"name": "Octinoxate", "category": "UV Filter", "riskLevel": "MODERATE", "harm": "Thyroid and estrogenic disruption.", "evidence": "Animal Data", "pregnancySafe": "AVOID", "tags": ["EDC Signal"]},
    "homosalate": {"name": "Homosalate", "category": "UV Filter", "riskLevel": "MODERATE", "harm": "Accumulates in the body; endocrine activity.", "evidence": "EU Review", "pregnancySafe": "CAUTION", "tags": ["Sunscreen", "EDC Signal"]},
    "octocrylene": {"name": "Octocrylene", "category": "UV Filter", "riskLevel": "MODERATE", "harm": "Degrades to benzophenone; photoallergen.", "evidence": "Research", "pregnancySafe": "CAUTION", "tags": ["Sunscreen", "Allergen"]},
    "avobenzone": {"name": "Avobenzone", "category": "UV Filter", "riskLevel": "MODERATE", "harm": "Unstable in sunlight; can irritate skin.", "evidence": "FDA Review", "pregnancySafe": "CAUTION", "tags": ["Sunscreen", "Irritant"]},
    "octisalate": {"name": "Octisalate", "category": "UV Filter", "riskLevel": "LOW", "harm": "Weak UVB filter with limited absorption data.", "evidence": "FDA Review", "pregnancySafe": "CAUTION", "tags": ["Sunscreen"]},
    "4-methylbenzylidene camphor": {"name": "4-Methylbenzylidene Camphor (4-MBC)", "category": "UV Filter", "riskLevel": "HIGH", "harm": "Thyroid and estrogenic activity.", "evidence": "SCCS", "pregnancySafe": "AVOID", "tags": ["EDC", "Hormone Disruptor"]},

    # --- Organochlorine pesticides ---
    "ddt": {"name": "DDT", "category": "Pesticide", "riskLevel": "HIGH", "harm": "Persistent EDC; reproductive damage.", "evidence": "WHO", "pregnancySafe": "AVOID", "tags": ["Banned", "EDC", "Reprotoxic"]},
    "lindane": {"name": "Lindane", "category": "Pesticide", "riskLevel": "HIGH", "harm": "Neurotoxic and endocrine concerns.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Toxic", "EDC"]},
    "methoxychlor": {"name": "Methoxychlor", "category": "Pesticide", "riskLevel": "HIGH", "harm": "Estrogenic pesticide; fertility effects.", "evidence": "EPA", "pregnancySafe": "AVOID", "tags": ["Banned", "Hormone Disruptor"]},
    "endosulfan": {"name": "Endosulfan", "category": "Pesticide", "riskLevel": "HIGH", "harm": "Persistent organochlorine; endocrine and neurotoxic.", "evidence": "Stockholm Convention", "pregnancySafe": "AVOID", "tags": ["Banned", "EDC"]},

    # --- Synthetic musks & fragrance ---
    "musk xylene": {"name": "Musk Xylene", "category": "Fragrance", "riskLevel": "HIGH", "harm": "Endocrine disruptor.", "evidence": "Bioaccumulation", "pregnancySafe": "AVOID", "tags": ["EDC"]},
    "musk ketone": {"name": "Musk Ketone", "category": "Fragrance", "riskLevel": "HIGH", "harm": "Persistent nitro musk with estrogenic activity.", "evidence": "ECHA", "pregnancySafe": "AVOID", "tags": ["EDC", "Persistent"]},
    "galaxolide": {"name": "Galaxolide (HHCB)", "category": "Fragrance", "riskLevel": "MODERATE", "harm": "Polycyclic musk; bioaccumulates, weak hormone activity.", "evidence": "Research", "pregnancySafe": "CAUTION", "tags": ["EDC Signal", "Persistent"]},
    "tonalide": {"name": "Tonalide (AHTN)", "category": "Fragrance", "riskLevel": "MODERATE", "harm": "Polycyclic musk; anti-estrogenic activity in vitro.", "evidence": "Research", "pregnancySafe": "CAUTION", "tags": ["EDC Signal", "Persistent"]},
    "lilial": {"name": "Lilial (Butylphenyl Methylpropional)", "category": "Fragrance", "riskLevel": "HIGH", "harm": "Reprotoxic; banned in EU cosmetics.", "evidence": "EU Ban", "pregnancySafe": "AVOID", "tags": ["Banned", "Reprotoxic"]},
    "fragrance": {"name": "Fragrance (Parfum)", "category": "Fragrance", "riskLevel": "MODERATE", "harm": "Undisclosed mixture; leading cause of cosmetic allergy.", "evidence": "AAD", "pregnancySafe": "CAUTION", "tags": ["Allergen", "Irritant"]},
    "limonene": {"name": "Limonene", "category": "Fragrance Allergen", "riskLevel": "MODERATE", "harm": "Oxidises to skin sensitizers.", "evidence": "EU Allergen List", "pregnancySafe": "SAFE", "tags": ["Allergen"]},
    "linalool": {"name": "Linalool", "category": "Fragrance Allergen", "riskLevel": "MODERATE", "harm": "Oxidised linalool is a common contact allergen.", "evidence": "EU Allergen List", "pregnancySafe": "SAFE", "tags": ["Allergen"]},

    # --- Heavy metals ---
    "lead": {"name": "Lead (Pb)", "category": "Heavy Metal", "riskLevel": "HIGH", "harm": "Neurotoxic and reproductive toxin.", "evidence": "CDC", "pregnancySafe": "AVOID", "tags": ["Toxic", "Reprotoxic"]},
    "cadmium": {"name": "Cadmium (Cd)", "category": "Heavy Metal", "riskLevel": "HIGH", "harm": "EDC and infertility link.", "evidence": "WHO", "pregnancySafe": "AVOID", "tags": ["Toxic", "EDC"]},
    "mercury": {"name": "Mercury (Hg)", "category": "Heavy Metal", "riskLevel": "HIGH", "harm": "Developmental toxicant.", "evidence": "EPA", "pregnancySafe": "AVOID", "tags": ["Neurotoxin"]},
    "arsenic": {"name": "Arsenic (As)", "category": "Heavy Metal", "riskLevel": "HIGH", "harm": "Known human carcinogen.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Carcinogen"]},
    "nickel": {"name": "Nickel (Ni)", "category": "Heavy Metal", "riskLevel": "MODERATE", "harm": "Most common metal contact allergen.", "evidence": "Dermatology", "pregnancySafe": "CAUTION", "tags": ["Allergen"]},

    # --- Industrial solvents ---
    "toluene": {"name": "Toluene", "category": "Solvent", "riskLevel": "HIGH", "harm": "Reproductive and developmental toxicity.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Neurotoxic", "Reprotoxic"]},
    "benzene": {"name": "Benzene", "category": "Solvent", "riskLevel": "HIGH", "harm": "Known human carcinogen.", "evidence": "NTP", "pregnancySafe": "AVOID", "tags": ["Carcinogen"]},
    "1,4-dioxane": {"name": "1,4-Dioxane", "category": "Solvent", "riskLevel": "HIGH", "harm": "Probable carcinogen; ethoxylation by-product.", "evidence": "EPA", "pregnancySafe": "AVOID", "tags": ["Carcinogen"]},
    "2-methoxyethanol": {"name": "2-Methoxyethanol", "category": "Solvent", "riskLevel": "HIGH", "harm": "Testicular and developmental toxicant.", "evidence": "ECHA", "pregnancySafe": "AVOID", "tags": ["Reprotoxic"]},

    # --- Other ingredients of concern ---
    "hydroquinone": {"name": "Hydroquinone", "category": "Skin Lightener", "riskLevel": "HIGH", "harm": "Ochronosis risk; restricted in EU cosmetics.", "evidence": "SCCS", "pregnancySafe": "AVOID", "tags": ["Irritant", "Banned"]},
    "coal tar": {"name": "Coal Tar", "category": "Colorant", "riskLevel": "HIGH", "harm": "Known human carcinogen.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Carcinogen"]},
    "butylated hydroxyanisole": {"name": "Butylated Hydroxyanisole (BHA)", "category": "Antioxidant", "riskLevel": "HIGH", "harm": "Possible carcinogen and endocrine disruptor.", "evidence": "IARC", "pregnancySafe": "AVOID", "tags": ["Carcinogen", "EDC"]},
    "butylated hydroxytoluene": {"name": "Butylated Hydroxytoluene (BHT)", "category": "Antioxidant", "riskLevel": "MODERATE", "harm": "Limited evidence of endocrine activity.", "evidence": "Research", "pregnancySafe": "CAUTION", "tags": ["EDC Signal"]},
    "sodium lauryl sulfate": {"name": "Sodium Lauryl Sulfate", "category": "Surfactant", "riskLevel": "MODERATE", "harm": "Strips skin barrier; known irritant.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Irritant"]},
    "sodium laureth sulfate": {"name": "Sodium Laureth Sulfate", "category": "Surfactant", "riskLevel": "MODERATE", "harm": "Irritant; may carry 1,4-dioxane residues.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Irritant"]},
    "retinol": {"name": "Retinol", "category": "Retinoid", "riskLevel": "MODERATE", "harm": "Effective active; irritating and not advised in pregnancy.", "evidence": "Dermatology", "pregnancySafe": "AVOID", "tags": ["Irritant", "Acne Treatment"]},
    "salicylic acid": {"name": "Salicylic Acid", "category": "Exfoliant", "riskLevel": "LOW", "harm": "Unclogs pores; limit high-strength peels in pregnancy.", "evidence": "Dermatology", "pregnancySafe": "CAUTION", "tags": ["Acne Treatment"]},
    "isopropyl myristate": {"name": "Isopropyl Myristate", "category": "Emollient", "riskLevel": "MODERATE", "harm": "Highly comedogenic.", "evidence": "Dermatology", "pregnancySafe": "SAFE", "tags": ["Pore-Clogging"]},
    "lanolin": {"name": "Lanolin", "category": "Emollient", "riskLevel": "MODERATE", "harm": "Comedogenic; wool-alcohol allergy.", "evidence": "Dermatology", "pregnancySafe": "SAFE", "tags": ["Pore-Clogging", "Allergen"]},
    "coconut oil": {"name": "Coconut Oil", "category": "Emollient", "riskLevel": "LOW", "harm": "Nourishing but clogs pores on acne-prone skin.", "evidence": "Dermatology", "pregnancySafe": "SAFE", "tags": ["Pore-Clogging"]},
    "talc": {"name": "Talc", "category": "Mineral Powder", "riskLevel": "MODERATE", "harm": "Risk of asbestos contamination.", "evidence": "IARC", "pregnancySafe": "CAUTION", "tags": ["Carcinogen"]},
    "phenoxyethanol": {"name": "Phenoxyethanol", "category": "Preservative", "riskLevel": "LOW", "harm": "Safe up to 1%; occasional irritant.", "evidence": "SCCS", "pregnancySafe": "SAFE", "tags": ["Irritant"]},

    # --- Natural EDCs ---
    "genistein": {"name": "Genistein (Soy)", "category": "Phytoestrogen", "riskLevel": "LOW", "harm": "Estrogenic activity (plant-derived).", "evidence": "Clinical", "pregnancySafe": "SAFE", "tags": ["Natural EDC"]},

    # --- Safe base ingredients ---
    "aqua": {"name": "Aqua", "category": "Solvent", "riskLevel": "LOW", "harm": "Safe base ingredient.", "evidence": "Inert", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "glycerin": {"name": "Glycerin", "category": "Humectant", "riskLevel": "LOW", "harm": "Safe moisturizer.", "evidence": "Clinical", "pregnancySafe": "SAFE", "tags": ["Hydrating"]},
    "niacinamide": {"name": "Niacinamide", "category": "Vitamin", "riskLevel": "LOW", "harm": "Safe for barrier repair.", "evidence": "Dermatology", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "zinc oxide": {"name": "Zinc Oxide", "category": "Mineral Filter", "riskLevel": "LOW", "harm": "Safest UV protection.", "evidence": "FDA GRAS", "pregnancySafe": "SAFE", "tags": ["Safe Sunscreen"]},
    "titanium dioxide": {"name": "Titanium Dioxide", "category": "Mineral Filter", "riskLevel": "LOW", "harm": "Mineral UV filter; avoid inhalable powders.", "evidence": "FDA GRAS", "pregnancySafe": "SAFE", "tags": ["Safe Sunscreen"]},
    "hyaluronic acid": {"name": "Hyaluronic Acid", "category": "Humectant", "riskLevel": "LOW", "harm": "Safe hydrating agent.", "evidence": "Clinical", "pregnancySafe": "SAFE", "tags": ["Hydrating"]},
    "panthenol": {"name": "Panthenol", "category": "Vitamin", "riskLevel": "LOW", "harm": "Soothing provitamin B5.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "tocopherol": {"name": "Tocopherol", "category": "Antioxidant", "riskLevel": "LOW", "harm": "Vitamin E antioxidant.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "squalane": {"name": "Squalane", "category": "Emollient", "riskLevel": "LOW", "harm": "Lightweight, non-irritating emollient.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "aloe barbadensis leaf juice": {"name": "Aloe Barbadensis Leaf Juice", "category": "Botanical", "riskLevel": "LOW", "harm": "Soothing botanical.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "allantoin": {"name": "Allantoin", "category": "Skin Conditioner", "riskLevel": "LOW", "harm": "Soothing skin protectant.", "evidence": "FDA", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "ceramide np": {"name": "Ceramide NP", "category": "Skin Conditioner", "riskLevel": "LOW", "harm": "Barrier-identical lipid.", "evidence": "Dermatology", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "butylene glycol": {"name": "Butylene Glycol", "category": "Humectant", "riskLevel": "LOW", "harm": "Safe humectant and solvent.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Hydrating"]},
    "dimethicone": {"name": "Dimethicone", "category": "Silicone", "riskLevel": "LOW", "harm": "Inert skin protectant.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "cetearyl alcohol": {"name": "Cetearyl Alcohol", "category": "Emulsifier", "riskLevel": "LOW", "harm": "Non-drying fatty alcohol.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "shea butter": {"name": "Shea Butter", "category": "Emollient", "riskLevel": "LOW", "harm": "Rich emollient; mildly comedogenic in high amounts.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Pore-Clogging (Mild)"]},
    "xanthan gum": {"name": "Xanthan Gum", "category": "Thickener", "riskLevel": "LOW", "harm": "Safe natural thickener.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "citric acid": {"name": "Citric Acid", "category": "pH Adjuster", "riskLevel": "LOW", "harm": "Safe pH adjuster.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
    "sodium chloride": {"name": "Sodium Chloride", "category": "Thickener", "riskLevel": "LOW", "harm": "Table salt; safe.", "evidence": "CIR", "pregnancySafe": "SAFE", "tags": ["Safe"]},
}


# ============================================================================
# Alias table (alias -> canonical key)
# ============================================================================

INGREDIENT_ALIASES: Dict[str, str] = {
    # Safe base
    "water": "aqua",
    "eau": "aqua",
    "glycerine": "glycerin",
    "glycerol": "glycerin",
    "nicotinamide": "niacinamide",
    "vitamin b3": "niacinamide",
    "ci 77947": "zinc oxide",
    "ci 77891": "titanium dioxide",
    "provitamin b5": "panthenol",
    "d-panthenol": "panthenol",
    "vitamin e": "tocopherol",
    "aloe vera": "aloe barbadensis leaf juice",
    "butyrospermum parkii butter": "shea butter",
    "cocos nucifera oil": "coconut oil",
    "salt": "sodium chloride",

    # Phthalates
    "dep": "diethyl phthalate",
    "dbp": "dibutyl phthalate",
    "dnbp": "dibutyl phthalate",
    "dehp": "diethylhexyl phthalate",
    "di(2-ethylhexyl) phthalate": "diethylhexyl phthalate",
    "dmp": "dimethyl phthalate",
    "bbp": "benzyl butyl phthalate",
    "butyl benzyl phthalate": "benzyl butyl phthalate",
    "dinp": "diisononyl phthalate",
    "didp": "diisodecyl phthalate",
    "ehdp": "2-ethylhexyl diphenyl phosphate",

    # Bisphenols
    "bpa": "bisphenol a",
    "bps": "bisphenol s",
    "bpf": "bisphenol f",
    "bpaf": "bisphenol af",

    # PFAS
    "perfluorooctanoic acid": "pfoa",
    "perfluorooctane sulfonate": "pfos",
    "perfluorooctanesulfonic acid": "pfos",
    "hfpo-da": "genx",
    "ptfe": "polytetrafluoroethylene",

    # Antimicrobials & preservatives
    "pcmx": "chloroxylenol",
    "mit": "methylisothiazolinone",
    "cmit": "methylchloroisothiazolinone",
    "2-bromo-2-nitropropane-1,3-diol": "bronopol",
    "formalin": "formaldehyde",
    "methylene glycol": "formaldehyde",

    # UV filters
    "benzophenone-3": "oxybenzone",
    "bp-3": "oxybenzone",
    "ethylhexyl methoxycinnamate": "octinoxate",
    "octyl methoxycinnamate": "octinoxate",
    "butyl methoxydibenzoylmethane": "avobenzone",
    "ethylhexyl salicylate": "octisalate",
    "4-mbc": "4-methylbenzylidene camphor",
    "enzacamene": "4-methylbenzylidene camphor",

    # Fragrance
    "parfum": "fragrance",
    "perfume": "fragrance",
    "hhcb": "galaxolide",
    "ahtn": "tonalide",
    "butylphenyl methylpropional": "lilial",
    "d-limonene": "limonene",

    # Metals & solvents
    "pb": "lead",
    "lead acetate": "lead",
    "hg": "mercury",
    "methylbenzene": "toluene",
    "dioxane": "1,4-dioxane",
    "egme": "2-methoxyethanol",

    # Other
    "bha": "butylated hydroxyanisole",
    "bht": "butylated hydroxytoluene",
    "sls": "sodium lauryl sulfate",
    "sles": "sodium laureth sulfate",
    "vitamin a": "retinol",
}


# ============================================================================
# Extended monitor list
# ============================================================================

# Chemicals of interest without curated detail. The database synthesizes a
# conservative HIGH / AVOID record for every name here that is not already
# curated or aliased.
EXTENDED_MONITOR_LIST: List[str] = [
    "Ethylparaben", "Benzylparaben", "Isopropylparaben", "Phenylparaben", "Heptylparaben", "Pentylparaben",
    "DnBP", "DEHP", "DMP", "BBP", "DINP", "DIDP", "DNOP", "DnHP", "DINCH", "BPF", "BPAF", "BPB",
    "PFHxS", "PFNA", "PFDA", "PFBA", "PFBS", "HFPO-DA", "Nonylphenol", "Octylphenol", "PCMX",
    "Diazolidinyl urea", "Bronopol", "Avobenzone", "Octisalate", "PABA", "4-MBC", "TCDD",
    "PCDFs", "DDE", "DDD", "Endosulfan", "Aldrin", "Dieldrin", "Chlordane", "Heptachlor",
    "Methoxychlor", "Chlorpyrifos", "Malathion", "Diazinon", "Parathion", "PBDEs", "BDE-47",
    "TDCPP", "TPP", "TCEP", "Tonalide", "Galaxolide", "Musk ketone", "2-Methoxyethanol",
    "2-Ethoxyethanol", "EGME", "Propyl gallate", "TBBPA", "Arsenic", "Nickel", "TCE",
    "Toluene", "Styrene", "Atrazine", "Simazine", "Mancozeb", "Vinclozolin", "TBHQ",
    "Hexachlorobenzene", "Mirex", "Chlorphenesin", "CTAB", "PPD", "Antimony", "Fluoride",
]

MONITOR_RECORD_TEMPLATE: Dict[str, Any] = {
    "category": "Chemical Additive",
    "riskLevel": "HIGH",
    "harm": "Potential endocrine disruptor or chemical concern.",
    "evidence": "Chemical Safety Database",
    "pregnancySafe": "AVOID",
    "tags": ["EDC Signal", "Monitor"],
}
