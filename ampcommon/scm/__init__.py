"""Source-control models, errors, reference helpers and provider payload mapping."""